def test_package_imports():
    """Verify all subpackages can be imported without errors."""
    import baseline_check
    import baseline_check.catalog
    import baseline_check.core
    import baseline_check.dataset
    import baseline_check.detector
    import baseline_check.docs
    import baseline_check.export
    import baseline_check.history
    import baseline_check.results

    assert baseline_check is not None


def test_catalog_builds_on_import():
    from baseline_check.catalog import CATALOG

    assert len(CATALOG) > 100
