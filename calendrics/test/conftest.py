"""
# Expose the contention harness to pytest as the `test` fixture.
"""
import pytest

from . import harness

class Test(harness.Test):
	__slots__ = ()

	def skip(self, condition):
		if condition:
			pytest.skip(str(condition))

	def fail(self, cause):
		pytest.fail(str(cause))

@pytest.fixture
def test(request):
	return Test(request.node.name, request.function)
