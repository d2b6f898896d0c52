import logging

import uvicorn
from mealgrid.api.api_run import app
from mealgrid.utilities.config import APP_HOST, APP_PORT, LOG_LEVEL


if __name__ == "__main__":
    logging.basicConfig(level=LOG_LEVEL, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    # Print a friendly message that points to the calendar page
    print(f"Meal planner running on http://localhost:{APP_PORT}/calendar (Press CTRL+C to quit)")
    uvicorn.run(app, host=APP_HOST, port=APP_PORT)
