"""운동 엔티티 모델 (공유)

저장소가 소유하는 읽기 전용 엔티티. JSON 키는 앱 계약에 맞춰 camelCase.
"""

from typing import List, Optional
from pydantic import BaseModel, ConfigDict, Field


class SecondaryMuscle(BaseModel):
    """보조 근육"""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    muscle: str = Field(..., description="근육명 (PT-BR)")
    muscle_en: Optional[str] = Field(default=None, alias="muscleEn", description="근육명 (EN)")


class InstructionStep(BaseModel):
    """수행 단계"""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    step_order: int = Field(..., alias="stepOrder", ge=1, description="단계 순서 (1부터)")
    instruction: str = Field(..., description="설명 (PT-BR)")


class Exercise(BaseModel):
    """운동

    예시:
    {
        "id": "0025",
        "name": "Supino reto com barra",
        "nameEn": "barbell bench press",
        "bodyPart": "peito",
        "target": "peitorais",
        "equipment": "barra",
        "gifUrl": "/media/exercises/0025.webp",
        "secondaryMuscles": [{"muscle": "tríceps"}],
        "instructions": [{"stepOrder": 1, "instruction": "Deite-se no banco..."}]
    }
    """

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    id: str = Field(..., description="운동 ID")
    name: str = Field(..., description="운동명 (PT-BR)")
    name_en: str = Field(default="", alias="nameEn", description="원어 운동명 (EN)")
    body_part: str = Field(default="", alias="bodyPart", description="신체 부위")
    target: str = Field(default="", description="주 타겟 근육")
    equipment: str = Field(default="", description="장비")
    gif_url: Optional[str] = Field(default=None, alias="gifUrl", description="GIF/WebP 경로")
    image_url: Optional[str] = Field(default=None, alias="imageUrl", description="이미지 경로")
    secondary_muscles: List[SecondaryMuscle] = Field(
        default_factory=list, alias="secondaryMuscles", description="보조 근육"
    )
    instructions: List[InstructionStep] = Field(
        default_factory=list, description="수행 단계 (stepOrder 오름차순)"
    )

    @property
    def has_media(self) -> bool:
        """시각 자료 보유 여부"""
        return bool(self.gif_url or self.image_url)
