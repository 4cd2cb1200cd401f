"""
value-exporter — Custom Object Exporter Example
~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~

Plug a renderer for specific types into the exporter with a chain.
"""

from datetime import datetime
from decimal import Decimal
from types import SimpleNamespace

from value_exporter import BaseObjectExporter, Exporter, ObjectExporterChain, type_name


class DatetimeExporter(BaseObjectExporter):
    """Render datetimes as ISO 8601 instead of an empty field list."""

    def handles(self, value: object) -> bool:
        return isinstance(value, datetime)

    def export(self, value: object, exporter: Exporter, indentation: int) -> str:
        return f"{type_name(value)} Object ({value.isoformat()})"


class DecimalExporter(BaseObjectExporter):
    """Render decimals by their exact string form."""

    def handles(self, value: object) -> bool:
        return isinstance(value, Decimal)

    def export(self, value: object, exporter: Exporter, indentation: int) -> str:
        return f"Decimal({exporter.export(str(value))})"


def main() -> None:
    chain = ObjectExporterChain()
    chain.register(DatetimeExporter())
    chain.register(DecimalExporter())

    exporter = Exporter(object_exporter=chain)

    invoice = SimpleNamespace(
        number="INV-001",
        issued=datetime(2024, 5, 1, 9, 30),
        total=Decimal("199.90"),
    )

    print("=" * 60)
    print("value-exporter — Custom Object Exporter Example")
    print("=" * 60)
    print(exporter.export(invoice))

    # Without a fallback, unknown records are an error
    strict = Exporter.from_dict(
        {"objects": {"default_fallback": False}}, object_exporter=chain
    )
    print("\nStrict exporter on an unhandled record:")
    try:
        strict.export(invoice)
    except Exception as e:
        print(e)


if __name__ == "__main__":
    main()
