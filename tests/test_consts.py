from suggest_mcp.consts import (
    LENGTH_PENALTY_CAP,
    LENGTH_PENALTY_PER_CHAR,
    MAX_SUGGESTIONS,
    MIN_SIMILARITY_SCORE,
    MODULE_FILE_EXTENSIONS,
    MODULE_PATH_MIN_SCORE_LONG,
    MODULE_PATH_MIN_SCORE_SHORT,
    PACKAGE_VERSION,
    WEIGHT_CONTAINMENT,
    WEIGHT_JACCARD,
    WEIGHT_JARO_WINKLER,
    WEIGHT_PREFIX,
)


class TestPackageConstants:
    """Test package constants are properly defined"""

    def test_package_version_defined(self):
        """Test that package version is defined"""
        assert isinstance(PACKAGE_VERSION, str)
        assert len(PACKAGE_VERSION) > 0
        assert "." in PACKAGE_VERSION  # Should be semantic version

    def test_weights_sum_to_one(self):
        """Test composite weights add up to a full score"""
        total = WEIGHT_JARO_WINKLER + WEIGHT_JACCARD + WEIGHT_CONTAINMENT + WEIGHT_PREFIX
        assert abs(total - 1.0) < 1e-9

    def test_thresholds(self):
        """Test threshold constants are ordered and in range"""
        assert MAX_SUGGESTIONS == 5
        assert 0.0 < MIN_SIMILARITY_SCORE < MODULE_PATH_MIN_SCORE_LONG
        assert MODULE_PATH_MIN_SCORE_LONG < MODULE_PATH_MIN_SCORE_SHORT < 1.0

    def test_length_penalty_cap(self):
        """Test the cap is reached after fifteen extra characters"""
        assert round(LENGTH_PENALTY_CAP / LENGTH_PENALTY_PER_CHAR) == 15

    def test_stub_files_checked_before_sources(self):
        """Test stub extensions are probed first"""
        assert MODULE_FILE_EXTENSIONS.index(".pyi") < MODULE_FILE_EXTENSIONS.index(".py")
