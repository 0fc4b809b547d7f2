"""Tests for the list style selector validator."""

from list_styles.validators.selector_validator import (
    ListSelectorValidator,
    SelectorValidationResult,
    is_class_character,
)


class TestListSelectorValidator:
    """Test cases for the list style selector validator."""

    def setup_method(self):
        """Set up test fixtures."""
        self.validator = ListSelectorValidator()

    def test_validate_single_class(self):
        """Test a list tag with one class."""
        result = self.validator.validate_selector("ul.btn")

        assert isinstance(result, SelectorValidationResult)
        assert result.valid is True
        assert result.error is None
        assert result.tag == "ul"
        assert result.classes == ("btn",)

    def test_validate_multiple_classes_keep_order(self):
        """Test that classes come back in selector order."""
        result = self.validator.validate_selector("ol.zeta.alpha.mid-dle")

        assert result.valid is True
        assert result.tag == "ol"
        assert result.classes == ("zeta", "alpha", "mid-dle")

    def test_validate_duplicate_classes_pass_through(self):
        """Duplicate classes are not collapsed."""
        result = self.validator.validate_selector("ul.a.a")

        assert result.valid is True
        assert result.classes == ("a", "a")

    def test_validate_class_characters(self):
        """Test digits, hyphens, underscores, case and non-ASCII letters."""
        valid_selectors = [
            "ul.btn_large",
            "ul.-leading-dash",
            "ul.123",
            "ul.CamelCase",
            "ul.café",
            "ol.列表",
            "ol.a\u00a0b",
        ]

        for selector in valid_selectors:
            result = self.validator.validate_selector(selector)
            assert result.valid is True, selector

    def test_validate_unsupported_tags(self):
        """Test that only the configured tags are accepted."""
        invalid_selectors = ["a.foo", "li.item", "UL.btn", "ulx.btn", "div.ul", ".btn"]

        for selector in invalid_selectors:
            result = self.validator.validate_selector(selector)

            assert result.valid is False, selector
            assert "Unsupported tag" in result.error

    def test_validate_missing_classes(self):
        """A bare tag is not a list style selector."""
        result = self.validator.validate_selector("ul")

        assert result.valid is False
        assert "at least one class" in result.error

    def test_validate_empty_class_segments(self):
        """Leading, trailing and doubled dots are rejected."""
        for selector in ["ul.", "ul..btn", "ul.btn.", "ul.btn..large"]:
            result = self.validator.validate_selector(selector)

            assert result.valid is False, selector
            assert result.error == "Empty class name"

    def test_validate_invalid_characters(self):
        """Test punctuation, whitespace and other selector syntax."""
        invalid_selectors = [
            "ul.btn#main",
            "ul.btn:hover",
            "ul.btn[data-x]",
            "ul.btn large",
            "ul.btn>li",
            "ul.btn\t",
            "ul.b$n",
            "ul.emoji\U0001F600",
        ]

        for selector in invalid_selectors:
            result = self.validator.validate_selector(selector)

            assert result.valid is False, selector
            assert result.error.startswith("Invalid character")
            assert result.tag is None
            assert result.classes == ()

    def test_custom_supported_tags(self):
        """Test a validator configured for a different tag."""
        validator = ListSelectorValidator(["a"])

        assert validator.is_valid("a.btn") is True
        assert validator.is_valid("ul.btn") is False

    def test_is_valid(self):
        """Test the boolean shortcut."""
        assert self.validator.is_valid("ol.steps") is True
        assert self.validator.is_valid("ol") is False


class TestIsClassCharacter:
    """Test cases for class name character classification."""

    def test_ascii_characters(self):
        for char in "azAZ09-_":
            assert is_class_character(char) is True, char

        for char in ".|#:[]()>+~ \t\n\"'\x7f":
            assert is_class_character(char) is False, repr(char)

    def test_non_ascii_range(self):
        assert is_class_character("\u009f") is False
        assert is_class_character("\u00a0") is True
        assert is_class_character("\uffff") is True
        assert is_class_character("\U00010000") is False


class TestSupportedTags:
    """Test cases for the configured tag list."""

    def test_default_tags(self):
        assert ListSelectorValidator().supported_tags == ("ol", "ul")

    def test_empty_tag_list_accepts_nothing(self):
        validator = ListSelectorValidator([])

        assert validator.supported_tags == ()
        assert validator.is_valid("ul.btn") is False
