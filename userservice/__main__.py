import uvicorn

from userservice.config.settings import get_settings
from userservice.main import create_app


def main():
    settings = get_settings()
    print(f"=== {settings.app.app_name} ===")
    print(f"API: {settings.server.get_url()}{settings.app.api_prefix}")
    print(f"Docs: {settings.server.get_url()}/docs")
    print(f"Health: {settings.server.get_url()}/health")
    print("==========================")

    uvicorn.run(
        create_app(settings),
        host=settings.server.host,
        port=settings.server.port,
        log_level=settings.app.log_level.lower(),
    )


if __name__ == "__main__":
    main()
