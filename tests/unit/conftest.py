"""Unit test configuration.

Unit tests run without network access; upstream HTTP is mocked with respx.
"""

import pytest


# Mark all tests in this directory as unit tests
pytestmark = pytest.mark.unit
