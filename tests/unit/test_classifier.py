"""
Unit tests for the keyword classifier.
"""

import pytest

from disclosure_sorter.core.classification import (
    DEFAULT_CATEGORY_RULES,
    Category,
    CategoryRule,
    KeywordClassifier,
)


@pytest.fixture
def classifier():
    return KeywordClassifier()


@pytest.mark.unit
class TestKeywordClassifier:
    """Tests for KeywordClassifier"""

    @pytest.mark.parametrize("label, expected", [
        ("LICITACIÓN PÚBLICA", Category.CONTRACTING_PUBLIC),
        ("Contrataciones Públicas", Category.CONTRACTING_PUBLIC),
        ("adjudicación directa", Category.CONTRACTING_PUBLIC),
        ("Otorgamiento de Concesiones", Category.CONCESSION_GRANT),
        ("CONCESIÓN", Category.CONCESSION_GRANT),
        ("Permisos y licencias", Category.CONCESSION_GRANT),
        ("Enajenación de Bienes", Category.ASSET_DISPOSAL),
        ("VENTA", Category.ASSET_DISPOSAL),
        ("Avalúos y Justipreciación", Category.APPRAISAL_RULING),
        ("DICTAMEN VALUATORIO", Category.APPRAISAL_RULING),
        ("Justipreciación de rentas", Category.APPRAISAL_RULING),
        ("PERITAJE", Category.APPRAISAL_RULING),
    ])
    def test_classify_known_labels(self, classifier, label, expected):
        """Test classification of representative labels"""
        assert classifier.classify(label) is expected

    def test_priority_order(self, classifier):
        """Test that the earlier category wins when keywords of two categories match"""
        assert classifier.classify("LICITACIÓN Y CONCESIÓN") is Category.CONTRACTING_PUBLIC
        assert classifier.classify("CONCESIÓN Y VENTA") is Category.CONCESSION_GRANT

    def test_priority_independent_of_substring_position(self, classifier):
        """Test that priority follows category order, not position in the label"""
        assert classifier.classify("VENTA POR CONTRATO") is Category.CONTRACTING_PUBLIC

    @pytest.mark.parametrize("label", ["", None, "DECLARACIÓN PATRIMONIAL", "otro"])
    def test_unclassified(self, classifier, label):
        """Test that empty or unmatched labels are unclassified"""
        assert classifier.classify(label) is Category.UNCLASSIFIED

    def test_case_insensitive(self, classifier):
        """Test that matching ignores case"""
        assert classifier.classify("licitación") is Category.CONTRACTING_PUBLIC

    def test_deterministic(self, classifier):
        """Test that the same label always yields the same category"""
        results = {classifier.classify("Enajenación de Bienes") for _ in range(10)}
        assert results == {Category.ASSET_DISPOSAL}

    def test_custom_order_changes_priority(self):
        """Test that reordering the rule table changes which category wins"""
        reordered = [DEFAULT_CATEGORY_RULES[1], DEFAULT_CATEGORY_RULES[0]]
        classifier = KeywordClassifier(reordered)
        assert classifier.classify("LICITACIÓN Y CONCESIÓN") is Category.CONCESSION_GRANT

    def test_duplicate_categories_rejected(self):
        """Test that a category may only appear once"""
        with pytest.raises(ValueError, match="only once"):
            KeywordClassifier([DEFAULT_CATEGORY_RULES[0], DEFAULT_CATEGORY_RULES[0]])

    def test_describe_criteria(self, classifier):
        """Test that criteria cover every category and the review bucket"""
        criteria = classifier.describe_criteria()
        assert set(criteria) == {c.value for c in Category} | {"revisar_casos"}
        assert criteria["asset_disposal"] == "ENAJENACIÓN DE BIENES MUEBLES"


@pytest.mark.unit
class TestCategoryRule:
    """Tests for CategoryRule"""

    def test_keywords_upper_cased(self):
        """Test that keywords are normalized to upper case"""
        rule = CategoryRule(category="asset_disposal", keywords=("venta", " subasta "))
        assert rule.keywords == ("VENTA", "SUBASTA")

    def test_unclassified_cannot_have_keywords(self):
        """Test that the fallback category is not allowed in the table"""
        with pytest.raises(ValueError):
            CategoryRule(category="unclassified", keywords=("X",))

    def test_empty_keywords_rejected(self):
        """Test that a rule needs at least one non-empty keyword"""
        with pytest.raises(ValueError):
            CategoryRule(category="asset_disposal", keywords=())
        with pytest.raises(ValueError):
            CategoryRule(category="asset_disposal", keywords=("  ",))
