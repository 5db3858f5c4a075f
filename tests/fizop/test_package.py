"""
Tests for the fizop package surface.

Importing the package builds every pydantic model and adapter, so a
schema that pydantic cannot construct fails here first.
"""

import fizop
from fizop.schemas import document_adapter


class TestPackage:
    def test_public_names_resolve(self):
        for name in fizop.__all__:
            assert getattr(fizop, name) is not None

    def test_version(self):
        assert fizop.__version__ == "1.0.0"

    def test_document_adapter_parses_both_label_kinds(self):
        result = document_adapter.validate_python({
            "flour": {"label": "flour"},
            "sugar": {"label": {"en": "sugar", "fr": "sucre"}},
        })
        assert result["flour"].label == "flour"
        assert result["sugar"].label == {"en": "sugar", "fr": "sucre"}
