"""
E2E tests for the Workout Tracker API.

These tests run against real services (Supabase database, a running server)
and should only be executed in CI nightly runs or explicitly by developers.

Usage:
    pytest -m e2e tests/e2e/       # Run all E2E tests
    pytest tests/e2e/ --live       # Run with live API flag
"""

# Rows created by e2e tests use this date and exercise-name prefix
E2E_DATE = "2099-01-01"
E2E_EXERCISE_PREFIX = "e2e-"
