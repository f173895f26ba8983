"""
Smoke test - verifies the package imports and the application factory builds.
Run: pytest tests/test_smoke.py -v
"""


def test_import_app():
    """Verify nextra package can be imported."""
    from nextra.core.config import get_settings

    settings = get_settings()
    assert settings is not None
    assert hasattr(settings, "data_dir")
    assert settings.logs_file.name == settings.logs_file_name


def test_create_application_registers_api_routes(settings):
    """Verify the application factory wires every API route."""
    from nextra.main import create_application

    application = create_application(settings)
    paths = {route.path for route in application.routes}

    assert {"/api/health", "/api/logs", "/api/users", "/api/users/{name:path}", "/api/checkUser"} <= paths
    assert application.state.settings is settings
