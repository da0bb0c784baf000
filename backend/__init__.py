"""
Process shell for the Workout Tracker API: settings, app factory and
the ``python -m backend`` entry point.
"""
