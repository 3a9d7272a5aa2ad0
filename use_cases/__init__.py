"""Application use-cases."""
from use_cases.ai_use_cases import (
    AnalyzeCVInput,
    AnalyzeCVUseCase,
    ImproveTextInput,
    ImproveTextUseCase,
    MatchJobInput,
    MatchJobUseCase,
    ParseCVTextInput,
    ParseCVTextUseCase,
)
from use_cases.auth_use_cases import (
    GetCurrentUserUseCase,
    SignInInput,
    SignInUseCase,
    SignOutUseCase,
    SignUpInput,
    SignUpUseCase,
)
from use_cases.cv_use_cases import (
    CreateCVInput,
    CreateCVUseCase,
    CVIdInput,
    DeleteCVUseCase,
    DuplicateCVUseCase,
    ExportCVInput,
    ExportCVUseCase,
    GetCVByIdInput,
    GetCVByIdUseCase,
    GetUserCVsUseCase,
    SetDefaultCVUseCase,
    UpdateCVInput,
    UpdateCVUseCase,
)

__all__ = [
    "AnalyzeCVInput",
    "AnalyzeCVUseCase",
    "ImproveTextInput",
    "ImproveTextUseCase",
    "MatchJobInput",
    "MatchJobUseCase",
    "ParseCVTextInput",
    "ParseCVTextUseCase",
    "GetCurrentUserUseCase",
    "SignInInput",
    "SignInUseCase",
    "SignOutUseCase",
    "SignUpInput",
    "SignUpUseCase",
    "CreateCVInput",
    "CreateCVUseCase",
    "CVIdInput",
    "DeleteCVUseCase",
    "DuplicateCVUseCase",
    "ExportCVInput",
    "ExportCVUseCase",
    "GetCVByIdInput",
    "GetCVByIdUseCase",
    "GetUserCVsUseCase",
    "SetDefaultCVUseCase",
    "UpdateCVInput",
    "UpdateCVUseCase",
]
