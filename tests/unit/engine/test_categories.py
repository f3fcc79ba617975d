"""
Unit tests for readiness categories.
"""

import pytest

from app.engine.categories import ReadinessCategory


class TestDescriptions:

    def test_every_category_has_description(self):
        for category in ReadinessCategory:
            assert category.description

    @pytest.mark.parametrize("category", list(ReadinessCategory))
    def test_descriptions_are_distinct(self, category):
        others = [c.description for c in ReadinessCategory if c is not category]
        assert category.description not in others

    def test_serialized_values(self):
        assert [c.value for c in ReadinessCategory] == [
            "unknown", "optimal", "moderate", "low", "fatigue",
        ]
