from __future__ import annotations


class BlogError(Exception):
    """블로그 API 도메인 오류"""


class FieldValidationError(BlogError):
    """입력 필드 검증 실패 (필드 이름 포함)"""

    def __init__(self, field: str, message: str):
        super().__init__(f"{field}: {message}")
        self.field = field
        self.message = message


class NotFoundError(BlogError):
    """
    존재하지 않는 리소스.
    공개 경로에서 draft 글을 조회한 경우도 같은 오류로 취급 (draft 존재 노출 방지).
    """

    def __init__(self, resource: str, resource_id: str):
        super().__init__(f"{resource} not found: {resource_id}")
        self.resource = resource
        self.resource_id = resource_id

    @property
    def detail(self) -> str:
        return f"{self.resource} not found."


class StoreError(BlogError):
    """저장소 접근 실패 (재시도는 저장소 클라이언트 책임)"""

    def __init__(self, operation: str):
        super().__init__(f"store operation failed: {operation}")
        self.operation = operation
