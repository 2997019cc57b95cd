#setup: python -m venv .venv
#setup: source .venv/bin/activate   # (windows: .venv\Scripts\activate)
#setup: pip install -U pip -e ".[test]"
#setup: flask --app interest_calculator.server run --port 5000 --debug

from __future__ import annotations

from interest_calculator import config
from interest_calculator.app import create_app

app = create_app()


if __name__ == "__main__":
    app.run(port=config.PORT, debug=config.DEBUG)
