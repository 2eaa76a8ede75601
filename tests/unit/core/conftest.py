"""Shared fixtures for core unit tests"""

import pytest


SAMPLE_MD = """\
# Heading 1

A paragraph with **bold** text and a [guide](/docs/guide/setup.md).

## Heading 2

- item one
- item two

```python
print("hello")
```

---

Footer paragraph with [external](https://example.com/x.md) and [relative](../sibling.md).
"""


@pytest.fixture(name="sample_md")
def sample_md_fixture():
    return SAMPLE_MD
