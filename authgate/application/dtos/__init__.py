"""Data Transfer Objects for application layer."""

from authgate.application.dtos.auth_dto import AuthResultDTO, LoginDTO, RegisterDTO
from authgate.application.dtos.user_dto import UserDTO

__all__ = ["AuthResultDTO", "LoginDTO", "RegisterDTO", "UserDTO"]
