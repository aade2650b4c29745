"""Test basic imports from the package."""


def test_main_import():
    """Test that the main package imports successfully."""
    import gitlab_rest
    assert gitlab_rest.__version__ == "0.4.0"
    assert hasattr(gitlab_rest, 'GitLabClient')
    assert hasattr(gitlab_rest, 'ProjectRepositoryStorageMoveService')


def test_runtime_import():
    """Test runtime module imports."""
    import gitlab_rest.runtime as runtime
    assert hasattr(runtime, 'GitLabError')
    assert hasattr(runtime, 'decode_json')
    assert hasattr(runtime, 'CancelToken')


def test_v4_import():
    """Test v4 module imports."""
    import gitlab_rest.v4 as v4
    assert hasattr(v4, 'ListOptions')
    assert hasattr(v4, 'with_next_page')


def test_public_names_resolve():
    """Every name in __all__ is importable."""
    import gitlab_rest
    for name in gitlab_rest.__all__:
        assert getattr(gitlab_rest, name) is not None, name
