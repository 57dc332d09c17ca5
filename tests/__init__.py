# =============================================================================
# tests/ - Test Suite
# =============================================================================
# This package contains all tests for the Masterclass API:
# - test_models.py: User model constraints
# - test_validation.py: BeanValidator violation reporting
# - test_beans.py: Provider catalog, scopes and qualifiers
# - test_services.py: Service lifecycle hooks
# - test_runners.py: Startup runners
# - test_config.py / test_logging_config.py: Settings, profiles, log levels
# - test_api.py: Endpoints, error handling and the app lifespan
#
# Run tests with: poetry run pytest
# =============================================================================
