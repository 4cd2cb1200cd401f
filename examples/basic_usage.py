"""
value-exporter — Basic Usage Example
~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~

Render nested data with cycles and shared objects, in full and shortened.
"""

from types import SimpleNamespace

from value_exporter import Exporter


def main() -> None:
    # Create an exporter with sensible defaults (no config needed)
    exporter = Exporter.default()

    author = SimpleNamespace(name="Ada", email="ada@example.com")
    report = {
        "title": "Quarterly\nreport",
        "pages": 12,
        "ratio": 0.75,
        "draft": False,
        "author": author,
        "reviewer": author,
        "rows": [[1, 2, 3], [4, 5, 6]],
    }
    report["self"] = report

    print("=" * 60)
    print("value-exporter — Basic Usage Example")
    print("=" * 60)

    # 1. Full multi-line rendering
    print("\n1. Full export:")
    print(exporter.export(report))

    # 2. One-line summaries
    print("\n2. Shortened export:")
    print(f"   {exporter.shortened_export('a rather long string ' * 5)}")
    print(f"   {exporter.shortened_export(report)}")
    print(f"   {exporter.shortened_export(author)}")

    # 3. Inline rendering with an element budget
    print("\n3. Shortened recursive export (budget of 5 elements):")
    limited = Exporter.from_dict({"arrays": {"shorten_longer_than": 5}})
    print(f"   {limited.shortened_recursive_export(list(range(100)))}")

    print("\n" + "=" * 60)
    print("Done!")


if __name__ == "__main__":
    main()
