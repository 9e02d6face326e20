from typing import List

from pydantic import BaseModel

from gestion_entretiens.models.enums import TypeEntretien


class TemplateSection(BaseModel):
    nom: str
    questions: List[str] = []


class TemplateStructure(BaseModel):
    sections: List[TemplateSection] = []


class TemplateResponse(BaseModel):
    id: int
    nom: str
    type: TypeEntretien
    structure: TemplateStructure

    class Config:
        from_attributes = True


class TemplateSummary(BaseModel):
    id: int
    nom: str
    type: TypeEntretien

    class Config:
        from_attributes = True
