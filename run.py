import os

from menu_admin import create_app
from menu_admin.config import DevConfig

app = create_app(DevConfig)

if __name__ == "__main__":
    host = os.getenv("HOST", "0.0.0.0")
    port = int(os.getenv("PORT", "3000"))
    debug = os.getenv("DEBUG", "true").strip().lower() in {"1", "true", "yes", "on"}
    app.logger.info("Server running at http://localhost:%s", port)
    app.logger.info("Frontend: http://localhost:%s", port)
    app.logger.info("API endpoints: http://localhost:%s/api", port)
    app.run(host=host, port=port, debug=debug)
