"""
Web application package for the tic-tac-toe engine.

Provides a FastAPI REST API (POST /play) for a browser front end. Run it
with `python -m web`.
"""
