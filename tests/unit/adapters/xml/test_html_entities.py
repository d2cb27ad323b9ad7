"""
Tests unitaires pour le decodeur d'entites HTML.
"""

import pytest

from etvdb.adapters.xml.html_entities import decode_html_entities


class TestDecodeHtmlEntities:
    """Tests de decode_html_entities."""

    @pytest.mark.parametrize(
        "text,expected",
        [
            ("Tom &amp; Jerry", "Tom & Jerry"),
            ("Fran&ccedil;ais", "Français"),
            ("Cat&apos;s", "Cat's"),
            ("&quot;Pilot&quot;", '"Pilot"'),
            ("&#233;t&#xE9;", "été"),
            ("plain text", "plain text"),
        ],
    )
    def test_decode(self, text: str, expected: str) -> None:
        assert decode_html_entities(text) == expected
