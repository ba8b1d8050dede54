def pytest_configure(config):
    config.addinivalue_line(
        "markers", "crud: marks tests related to CRUD operations"
    )
    config.addinivalue_line(
        "markers", "pricing: marks tests related to pricing"
    )
    config.addinivalue_line(
        "markers", "maps: marks tests related to address resolution"
    )
