import importlib
import pytest

@pytest.mark.parametrize("module", [
    "colorquant",
    "colorquant.algorithms",
    "colorquant.assignments",
    "colorquant.representations",
    "colorquant.updates",
    "colorquant.distances",
    "colorquant.initialization",
    "colorquant.quantization",
    "colorquant.utils",
    "colorquant.io",
    "colorquant.cli",
    "colorquant.visualization",
])
def test_submodules_exist(module):
    mod = importlib.import_module(module)
    assert mod is not None
