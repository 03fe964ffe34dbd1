#
# Pytest Fixtures
#

# Third-party ----------------------------------------------------------------------------------------------------------
import pytest

# Local ----------------------------------------------------------------------------------------------------------------
from vouch.errors import CheckedValidationError, UncheckedValidationError
from vouch.validators import Doubt, Hope

# Fixtures -------------------------------------------------------------------------------------------------------------


@pytest.fixture(
    params=[
        pytest.param((Hope, UncheckedValidationError), id="hope"),
        pytest.param((Doubt, CheckedValidationError), id="doubt"),
    ]
)
def preset(request):
    """Validator preset paired with the error kind it raises."""
    return request.param


@pytest.fixture
def v(preset):
    """Factory building a validator from the current preset."""
    cls, _ = preset
    return cls.that


@pytest.fixture
def error(preset):
    """Error kind raised by the current preset."""
    _, err = preset
    return err
