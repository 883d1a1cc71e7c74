"""Basic test to verify test infrastructure is working."""


def test_project_structure():
    """Verify that the project structure is set up correctly."""
    import skylut

    assert hasattr(skylut, "__version__")
    assert skylut.__version__ == "0.1.0"
