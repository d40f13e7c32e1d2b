from .auth import LoginFormDTO, RegisterFormDTO

__all__ = ["LoginFormDTO", "RegisterFormDTO"]
