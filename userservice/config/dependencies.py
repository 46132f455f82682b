from fastapi import Request

from userservice.users.services import UserService

# ----------------------------
# Dependency Injection Functions
# ----------------------------

# One service (and store) per application, held on app.state
def get_user_service(request: Request) -> UserService:
    return request.app.state.user_service
