"""
Tests for fizop.validation.semantic

Covers locale coverage across operators, locale tag syntax and
image data checks for every image type.
"""

import pytest

from fizop.validation.report import ValidationIssue
from fizop.validation.semantic import (
    is_valid_data_uri_format,
    is_valid_locale,
    is_valid_path_format,
    is_valid_url_format,
    validate_images,
    validate_locale_consistency,
    validate_locale_formats,
)


class TestLocaleConsistency:
    def test_empty_document(self):
        assert validate_locale_consistency({}) == []

    def test_consistent_locales(self, bilingual_fizop):
        assert validate_locale_consistency(bilingual_fizop) == []

    def test_missing_locale(self):
        doc = {
            "flour": {"label": {"en": "flour", "fr": "farine"}},
            "water": {"label": {"en": "water"}},
        }
        assert validate_locale_consistency(doc) == [ValidationIssue("water", "Missing locale fr")]

    def test_extra_locale(self):
        doc = {
            "a": {"label": {"en": "Hi"}},
            "b": {"label": {"en": "Hi", "fr": "Salut"}},
        }
        assert validate_locale_consistency(doc) == [ValidationIssue("b", "Extra locale fr")]

    def test_missing_reported_before_extra(self):
        doc = {
            "a": {"label": {"en": "Hi", "fr": "Salut"}},
            "b": {"label": {"de": "Hallo", "en": "Hi"}},
        }
        assert validate_locale_consistency(doc) == [
            ValidationIssue("b", "Missing locale fr"),
            ValidationIssue("b", "Extra locale de"),
        ]

    def test_unlabeled_operator_compared_against_reference(self):
        doc = {
            "plain": {},
            "flour": {"label": {"en": "flour"}},
            "text": {"label": "water"},
        }
        assert validate_locale_consistency(doc) == [
            ValidationIssue("plain", "Missing locale en"),
            ValidationIssue("text", "Missing locale en"),
        ]

    def test_reference_is_first_mapping_label(self):
        doc = {
            "a": {"label": "plain"},
            "b": {"label": {"en": "B"}},
            "c": {"label": {"fr": "C"}},
        }
        issues = validate_locale_consistency(doc)
        assert all(i.operator_name != "b" for i in issues)
        assert ValidationIssue("c", "Extra locale fr") in issues

    def test_empty_label_as_reference(self):
        doc = {
            "a": {"label": {}},
            "b": {"label": {"en": "B"}},
        }
        assert validate_locale_consistency(doc) == [ValidationIssue("b", "Extra locale en")]

    def test_no_mapping_labels(self):
        doc = {"a": {"label": "A"}, "b": {}}
        assert validate_locale_consistency(doc) == []


class TestLocaleFormats:
    def test_region_locales_are_valid(self):
        doc = {"eggplant": {"label": {"en-US": "Eggplant", "en-GB": "Aubergine"}}}
        assert validate_locale_formats(doc) == []

    def test_invalid_locale(self):
        doc = {"a": {"label": {"_": "?"}}}
        assert validate_locale_formats(doc) == [ValidationIssue("a", "Invalid locale _")]

    def test_invalid_locale_reported_once(self):
        doc = {
            "a": {"label": {"en": "A", "en_US": "A"}},
            "b": {"label": {"en": "B", "en_US": "B"}},
        }
        assert validate_locale_formats(doc) == [ValidationIssue("a", "Invalid locale en_US")]

    def test_attributed_to_first_operator_using_tag(self):
        doc = {
            "a": {"label": {"en": "A"}},
            "b": {"label": {"en": "B", "_": "?"}},
            "c": {"label": {"_": "?"}},
        }
        assert validate_locale_formats(doc) == [ValidationIssue("b", "Invalid locale _")]

    def test_string_labels_contribute_no_tags(self):
        assert validate_locale_formats({"a": {"label": "_"}}) == []

    @pytest.mark.parametrize("tag", ["en", "fr", "en-US", "zh-Hant", "pt-BR"])
    def test_is_valid_locale_accepts(self, tag):
        assert is_valid_locale(tag)

    @pytest.mark.parametrize("tag", ["", "_", "en_US"])
    def test_is_valid_locale_rejects(self, tag):
        assert not is_valid_locale(tag)

    @pytest.mark.parametrize("tag", ["jp", "xx"])
    def test_unregistered_language_subtag_rejected(self, tag):
        assert not is_valid_locale(tag)


class TestImages:
    def test_url_image_is_valid(self, image_url):
        doc = {"test": {"image": {"imgType": "URL", "imgData": image_url}}}
        assert validate_images(doc) == []

    def test_data_uri_image_is_valid(self, png_data_uri):
        doc = {"test": {"image": {"imgType": "DataUri", "imgData": png_data_uri}}}
        assert validate_images(doc) == []

    def test_unpkg_path_image_is_valid(self, tmp_path):
        img = tmp_path / "emptyTestFile"
        img.write_text("")
        doc = {"test": {"image": {"imgType": "UnpkgPath", "imgData": str(img)}}}
        assert validate_images(doc) == []

    def test_unpkg_path_resolved_against_base_dir(self, tmp_path):
        (tmp_path / "img").mkdir()
        (tmp_path / "img" / "flour.png").write_bytes(b"")
        doc = {"flour": {"image": {"imgType": "UnpkgPath", "imgData": "img/flour.png"}}}
        assert validate_images(doc, base_dir=str(tmp_path)) == []
        assert len(validate_images(doc)) == 1

    def test_invalid_url_data(self):
        doc = {"a": {"image": {"imgType": "URL", "imgData": "not a url"}}}
        assert validate_images(doc) == [
            ValidationIssue("a", "Invalid imgeData not a url for imgType URL"),
        ]

    def test_missing_path(self, tmp_path):
        missing = str(tmp_path / "doesNotExist")
        doc = {"a": {"image": {"imgType": "UnpkgPath", "imgData": missing}}}
        assert validate_images(doc) == [
            ValidationIssue("a", f"Invalid imgeData {missing} for imgType UnpkgPath"),
        ]

    def test_unknown_img_type_yields_two_issues(self):
        doc = {"a": {"image": {"imgType": "bogus", "imgData": "x"}}}
        assert validate_images(doc) == [
            ValidationIssue("a", "Invalid imgType bogus"),
            ValidationIssue("a", "Invalid imgeData x for imgType bogus"),
        ]

    def test_unknown_img_type_with_plausible_data(self, image_url):
        doc = {"test": {"image": {"imgType": "path", "imgData": image_url}}}
        assert len(validate_images(doc)) == 2

    def test_operators_without_image_skipped(self):
        assert validate_images({"a": {}, "b": {"label": "B", "image": None}}) == []

    def test_traversal_order(self):
        doc = {
            "z": {"image": {"imgType": "URL", "imgData": "nope"}},
            "a": {"image": {"imgType": "DataUri", "imgData": "nope"}},
        }
        assert [i.operator_name for i in validate_images(doc)] == ["z", "a"]


class TestImageFormatPredicates:
    def test_invalid_data_uri_rejected(self):
        assert not is_valid_data_uri_format("invalidDataUri")

    def test_plain_data_uri_accepted(self):
        assert is_valid_data_uri_format("data:,Hello%2C%20World%21")
        assert is_valid_data_uri_format("data:text/plain;charset=US-ASCII,hello")

    def test_bad_base64_payload_rejected(self):
        assert not is_valid_data_uri_format("data:image/png;base64,abc")

    def test_invalid_path_rejected(self, tmp_path):
        assert not is_valid_path_format(str(tmp_path / "doesNotExist"))

    def test_existing_directory_accepted(self, tmp_path):
        assert is_valid_path_format(str(tmp_path))

    def test_invalid_url_rejected(self):
        assert not is_valid_url_format("notaurl.com")

    def test_url_accepted(self, image_url):
        assert is_valid_url_format(image_url)

    def test_empty_path_rejected(self, tmp_path):
        assert not is_valid_path_format("")
        assert not is_valid_path_format("", str(tmp_path))

    def test_empty_unpkg_path_image_reported(self, tmp_path):
        doc = {"a": {"image": {"imgType": "UnpkgPath", "imgData": ""}}}
        assert validate_images(doc, str(tmp_path)) == [
            ValidationIssue("a", "Invalid imgeData  for imgType UnpkgPath"),
        ]

    def test_data_uri_payload_runs_to_end_of_string(self):
        assert is_valid_data_uri_format("data:;base64,aGk=\n")
        assert not is_valid_data_uri_format("data:;base64,aGk\n")
        assert not is_valid_data_uri_format("data:,ok\n#")
