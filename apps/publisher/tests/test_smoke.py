def test_publisher_imports():
    """Verify all publisher submodules can be imported without errors."""
    import publisher
    import publisher.cli
    import publisher.core.config
    import publisher.core.logging
    import publisher.notifier
    import publisher.resolver
    import publisher.uploader

    assert publisher is not None
