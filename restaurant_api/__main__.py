"""
Run the API with uvicorn: ``python -m restaurant_api``
"""
import uvicorn

from restaurant_api.core.config import get_settings
from restaurant_api.main import create_app


def main() -> None:
    settings = get_settings()
    uvicorn.run(create_app(settings), host="0.0.0.0", port=settings.PORT)


if __name__ == "__main__":
    main()
