# =============================================================================
# core/ - Business Logic Package
# =============================================================================
# This package contains the application logic behind the routes:
# - models/: Pydantic schemas and their field constraints
# - validation.py: BeanValidator that reports constraint violations
# - beans.py: Named provider catalog (singleton / prototype scopes)
# - services/: Lifecycle demo service and user registration
# - runners.py: Jobs run once at startup
#
# Code in this package should NOT define routes. The only app/ import is
# app.exceptions, for the shared error hierarchy.
# =============================================================================
