"""운동 카탈로그 예외"""


class CatalogError(Exception):
    """카탈로그 기본 예외"""


class ExerciseNotFoundError(CatalogError):
    """ID 로 조회한 운동이 없음 (404)"""

    def __init__(self, exercise_id: str):
        self.exercise_id = exercise_id
        super().__init__(f"Exercício com ID {exercise_id} não encontrado")


class CatalogLoadError(CatalogError):
    """카탈로그 파일 누락 또는 형식 오류"""
