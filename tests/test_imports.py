"""
Tests for verifying all imports from the yeewave package are working correctly.
"""

import pytest

# Test main package imports
def test_main_package_import():
    """Test that the main yeewave package can be imported."""
    import yeewave
    assert yeewave.__version__ is not None

# Test design module imports
@pytest.mark.parametrize("name", ['Obstacle', 'PointSource'])
def test_design_imports(name: str):
    """Test that all design module components can be imported."""
    exec(f"from yeewave.design import {name}")

# Test simulation module imports
@pytest.mark.parametrize("name", [
    'Grid', 'FieldState', 'Simulation', 'create', 'step', 'read_field', 'get_backend'
])
def test_simulation_imports(name: str):
    """Test that all simulation module components can be imported."""
    exec(f"from yeewave.simulation import {name}")

# Test constant imports
@pytest.mark.parametrize("name", [
    'DEFAULT_DT', 'DEFAULT_C', 'DEFAULT_SIZE', 'DEFAULT_SUBSTEPS',
    'ABSORBING', 'REFLECTING', 'MAX_CELLS'
])
def test_constant_imports(name: str):
    """Test that all constants can be imported."""
    exec(f"from yeewave import {name}")

def test_imported_types():
    """Test that imported components are of the correct type."""
    from yeewave import FieldConfig, Grid, FieldState, Simulation, InvalidConfiguration, IndexOutOfBounds

    assert isinstance(FieldConfig, type)
    assert isinstance(Grid, type)
    assert isinstance(FieldState, type)
    assert isinstance(Simulation, type)
    assert issubclass(InvalidConfiguration, ValueError)
    assert issubclass(IndexOutOfBounds, IndexError)
