# =============================================================================
# File: run.py
# Purpose: Entry point for development. Starts the roster Flask app.
# =============================================================================
# run.py
from roster import create_app

app = create_app()

if __name__ == "__main__":
    app.run(debug=True)
