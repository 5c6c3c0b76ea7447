import logging
import uvicorn
from menu.api.api_run import app
from menu.utilities.config import APP_HOST, APP_PORT, LOG_LEVEL, LOG_FORMAT


if __name__ == "__main__":
    logging.basicConfig(level=LOG_LEVEL, format=LOG_FORMAT)
    host_label = "localhost" if APP_HOST in ("0.0.0.0", "127.0.0.1") else APP_HOST
    # Point to the URL you can open in a browser
    print(f"Menu Item Builder running on http://{host_label}:{APP_PORT} (Press CTRL+C to quit)")
    uvicorn.run(app, host=APP_HOST, port=APP_PORT, log_level=LOG_LEVEL.lower())
