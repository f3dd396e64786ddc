"""
Unit tests for data-layer recognition results.
"""
import typing

import pytest

from recognizer import remote_result as do
from recognizer.remote_result import RemoteRecognitionResultType, result_type_of
from tests.helpers import create_track_entity


@pytest.mark.unit
class TestRemoteRecognitionResultDo:
    """Test the closed set of recognition outcomes."""

    def test_union_has_seven_variants(self):
        """Test that the union lists every outcome exactly once."""
        variants = typing.get_args(do.RemoteRecognitionResultDo)
        assert set(variants) == {
            do.Success,
            do.NoMatches,
            do.BadConnection,
            do.BadRecording,
            do.HttpError,
            do.WrongToken,
            do.UnhandledError,
        }
        assert len(variants) == 7

    def test_variants_are_immutable(self):
        """Test that results cannot be mutated after construction."""
        result = do.HttpError(code=500, message="Internal Server Error")
        with pytest.raises(AttributeError):
            result.code = 404

    def test_fieldless_variants_compare_equal(self):
        assert do.NoMatches() == do.NoMatches()
        assert do.BadConnection() == do.BadConnection()


@pytest.mark.unit
class TestResultTypeOf:
    """Test storage tags for recognition results."""

    @pytest.mark.parametrize(
        "result, expected",
        [
            (do.NoMatches(), RemoteRecognitionResultType.NO_MATCHES),
            (do.BadConnection(), RemoteRecognitionResultType.BAD_CONNECTION),
            (do.BadRecording("too short"), RemoteRecognitionResultType.BAD_RECORDING),
            (do.HttpError(503, "Service Unavailable"), RemoteRecognitionResultType.HTTP_ERROR),
            (do.WrongToken(is_limit_reached=False), RemoteRecognitionResultType.AUTH_ERROR),
            (do.WrongToken(is_limit_reached=True), RemoteRecognitionResultType.API_USAGE_LIMITED),
            (do.UnhandledError("boom"), RemoteRecognitionResultType.UNHANDLED_ERROR),
        ],
    )
    def test_error_variants(self, result, expected):
        assert result_type_of(result) is expected

    def test_success(self):
        result = do.Success(create_track_entity())
        assert result_type_of(result) is RemoteRecognitionResultType.SUCCESS

    def test_stored_values_are_stable(self):
        """Test the string values written alongside enqueued recognitions."""
        assert [t.value for t in RemoteRecognitionResultType] == [
            "Success",
            "NoMatches",
            "BadConnection",
            "BadRecording",
            "AuthError",
            "ApiUsageLimited",
            "HttpError",
            "UnhandledError",
        ]

    def test_unknown_value_is_a_defect(self):
        """Test that a value outside the union fails loudly."""
        with pytest.raises(AssertionError):
            result_type_of("not a result")
