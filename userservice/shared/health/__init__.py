from userservice.shared.health.health_check import HealthChecker, create_health_router

__all__ = ["HealthChecker", "create_health_router"]
