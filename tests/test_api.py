"""
Tests for the plain-value lookups over the bundled FCT data.
"""

from postalcodes import api


class TestRegionAndTown:
    """Test area council and town lookups."""

    def test_by_region(self):
        assert api.by_region("Bwari") == {"postal_codes": ["901101"], "districts": ["Bwari"]}

    def test_by_region_not_found(self):
        assert api.by_region("Invalid Area") == 'Region "Invalid Area" not found.'

    def test_by_town(self):
        assert api.by_town("Lugbe") == {
            "postal_codes": ["900107"],
            "districts": ["Kabusa"],
            "regions": ["Abuja Municipal"],
        }

    def test_by_town_not_found(self):
        assert api.by_town("Invalid Town") == 'Town "Invalid Town" not found.'


class TestAccessors:
    """Test listing helpers."""

    def test_get_towns(self):
        result = api.get_towns("900107")
        assert "Lugbe" in result["towns"]
        assert result["district"] == "Kabusa"
        assert result["region"] == "Abuja Municipal"

    def test_get_towns_not_found(self):
        assert api.get_towns("000000") == 'Postal code "000000" not found.'

    def test_get_all_regions(self):
        regions = api.get_all_regions()
        for name in ["Abuja Municipal", "Gwagwalada", "Kuje", "Bwari", "Abaji", "Kwali"]:
            assert name in regions

    def test_get_districts(self):
        districts = api.get_districts("Abuja")
        for name in ["Garki", "Gui", "Orozo", "Karshi", "Kabusa", "Nyanya", "Gwagwa", "Jiwa", "Gwarinpa", "Karu"]:
            assert name in districts

    def test_get_districts_not_found(self):
        assert api.get_districts("Invalid Area") == 'Region "Invalid Area" not found.'


class TestSearchPostalCode:
    """Test three-criterion search."""

    def test_valid(self):
        assert api.search_postal_code("Abuja", "Kabusa", "Lugbe") == {
            "postal_code": "900107",
            "district": "Kabusa",
            "region": "Abuja Municipal",
        }

    def test_partial(self):
        assert api.search_postal_code("Abu", "Kab", "Lugb")["postal_code"] == "900107"

    def test_exact_names(self):
        assert api.search_postal_code("Abuja Municipal", "Kabusa", "Lugbe")["district"] == "Kabusa"

    def test_invalid_region(self):
        assert api.search_postal_code("Invalid LGA", "Kabusa", "Lugbe") == (
            'No match found for LGA: "Invalid LGA", District: "Kabusa", and Town: "Lugbe".'
        )

    def test_invalid_district(self):
        assert api.search_postal_code("Abuja", "Invalid District", "Lugbe") == (
            'No match found for LGA: "Abuja", District: "Invalid District", and Town: "Lugbe".'
        )

    def test_invalid_town(self):
        assert api.search_postal_code("Abuja Municipal", "Garki", "Nonexistent Town") == (
            'No match found for LGA: "Abuja Municipal", District: "Garki", and Town: "Nonexistent Town".'
        )


class TestFlexibleSearch:
    """Test progressive search."""

    def test_region_and_district(self):
        assert api.flexible_search("Abuja Municipal", "Garki") == {
            "postal_code": "900241",
            "district": "Garki-rural",
            "region": "Abuja Municipal",
        }

    def test_region_only(self):
        assert api.flexible_search("Bwari") == {
            "postal_code": "901101",
            "district": "Bwari",
            "region": "Bwari",
        }

    def test_unmatched_town_keeps_district(self):
        assert api.flexible_search("Abuja Municipal", "Kabusa", "Nonexistent Town")["postal_code"] == "900107"

    def test_region_not_found(self):
        assert api.flexible_search("Nonexistent LGA") == (
            'No match found for LGA: "Nonexistent LGA", District: "", and Town: "".'
        )

    def test_district_not_found(self):
        assert api.flexible_search("Abuja Municipal", "Nonexistent District") == (
            'No match found for LGA: "Abuja Municipal", District: "Nonexistent District", and Town: "".'
        )
