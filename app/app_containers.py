from dependency_injector import containers, providers
from app.v1_0.v1_containers import APIContainer

class ApplicationContainer(containers.DeclarativeContainer):
    wiring_config = containers.WiringConfiguration(
        modules=[
                "app.v1_0.routers.title_router",
                "app.v1_0.routers.license_router",
                "app.v1_0.routers.provider_router",
                "app.v1_0.routers.genre_router",
                "app.v1_0.routers.origin_router",
                "app.v1_0.routers.admin_router",
                "app.v1_0.routers.viewer_router",
                "app.v1_0.routers.dashboard_router",
                "app.v1_0.routers.analytics_router",
                "app.v1_0.routers.notification_router",
            ]
    )

    api_container = providers.Container(
        APIContainer
    )
