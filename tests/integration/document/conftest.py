from pathlib import Path

import pytest

from md_kit.document.models import Document
from md_kit.document.store import DocumentStore

STYLE_GUIDE = """\
# Frappe & ERPNext Customization Style Guide

Conventions for apps built on top of the Frappe framework.

## Naming

| Kind | Convention | Example |
|:-----|:----------:|--------:|
| DocType | Title Case | Sales Invoice |
| Fieldname | snake_case | custom_discount |
| Module file | snake_case | discount_calculator.py |

- Prefix custom fields with `custom_`
- Keep DocType names singular
  - Use "Item Group", not "Item Groups"

## Python

```python
def calculate_discount(doc, method=None):
    if doc.grand_total > 1000:
        doc.discount_amount = doc.grand_total * 0.05
```

## JavaScript

```javascript
frappe.ui.form.on("Sales Invoice", {
    refresh(frm) {
        frm.set_query("customer", () => ({ filters: { disabled: 0 } }));
    },
});
```

## Reports

~~~sql
SELECT name, customer, grand_total
FROM `tabSales Invoice`
WHERE docstatus = 1
~~~

## Patches

1. Add the patch to `patches.txt`
2. Make it idempotent

```python
import frappe

def execute():
    frappe.reload_doc("selling", "doctype", "sales_order")
```
"""

EXPECTED_HEADINGS = [
    "Frappe & ERPNext Customization Style Guide",
    "Naming",
    "Python",
    "JavaScript",
    "Reports",
    "Patches",
]


@pytest.fixture(scope="module")
def guide_dir(tmp_path_factory: pytest.TempPathFactory) -> Path:
    """Write the style guide fixtures once per module."""
    dir_path: Path = tmp_path_factory.mktemp("guides")

    (dir_path / "style_guide.md").write_text(STYLE_GUIDE, encoding="utf-8")
    (dir_path / "broken.md").write_text(
        STYLE_GUIDE + "\n## Broken\n\n```python\nprint('no end')\n",
        encoding="utf-8",
    )

    return dir_path


@pytest.fixture(scope="module")
def parsed_guide(guide_dir: Path) -> Document:
    """Parse the style guide once, reuse across tests."""
    return DocumentStore().load_file(guide_dir / "style_guide.md")


@pytest.fixture
def style_guide_source() -> str:
    return STYLE_GUIDE


@pytest.fixture
def expected_headings() -> list[str]:
    return list(EXPECTED_HEADINGS)
