"""
Validation et coercition des commandes reçues par l'API

Les règles de coercition sont des fonctions indépendantes (levant ValueError
avec un message lisible) ; le schéma pydantic les applique champ par champ et
collecte toutes les erreurs avant d'échouer. `validate_commande` agrège ces
erreurs en un seul message.
"""

import math
import re
from datetime import date, datetime
from enum import Enum
from typing import Any, Callable, Dict, Mapping, Type

from pydantic import BaseModel, ConfigDict, ValidationInfo, field_validator
from pydantic import ValidationError as PydanticValidationError
from pydantic.alias_generators import to_camel
from pydantic_core import PydanticCustomError

from domain.entities import CommandeData, Produit, Statut
from domain.errors import ValidationError

REQUIRED_MESSAGES = {
    "client": "Le client est requis",
    "numero_bon_commande": "Le numéro de bon de commande est requis",
    "date_livraison": "La date de livraison est requise",
    "depot": "Le dépôt est requis",
    "camion": "Le camion est requis",
    "quantite": "La quantité est requise",
    "produit": "Le produit est requis",
    "fournisseur": "Le fournisseur est requis",
    "date_chargement": "La date de chargement est requise",
    "statut": "Le statut est requis",
    "transporteur": "Le transporteur est requis",
    "destination": "La destination est requise",
    "taux_transport": "Le taux de transport est requis",
}

POSITIVE_MESSAGES = {
    "quantite": "La quantité doit être positive",
    "taux_transport": "Le taux de transport doit être positif",
}

INVALID_DATE_MESSAGES = {
    "date_livraison": "Date de livraison invalide",
    "date_chargement": "Date de chargement invalide",
}

_NUMBER_PATTERN = re.compile(r"^[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?$")


def _type_name(value: Any) -> str:
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, (list, tuple)):
        return "array"
    return "object"


def require_text(value: Any, required_message: str) -> str:
    """Texte libre non vide"""
    if value is None or value == "":
        raise ValueError(required_message)
    if not isinstance(value, str):
        raise ValueError(f"Expected string, received {_type_name(value)}")
    return value


def coerce_positive_number(value: Any, positive_message: str) -> float:
    """Nombre strictement positif, fourni en nombre ou en chaîne"""
    if value is None:
        raise ValueError(positive_message)
    if isinstance(value, bool):
        raise ValueError("Expected number, received boolean")

    if isinstance(value, (int, float)):
        number = float(value)
    elif isinstance(value, str):
        text = value.strip()
        if not _NUMBER_PATTERN.match(text):
            raise ValueError(f"Expected number, received '{value}'")
        number = float(text)
    else:
        raise ValueError(f"Expected number, received {_type_name(value)}")

    if not math.isfinite(number) or number <= 0:
        raise ValueError(positive_message)
    return number


def coerce_calendar_date(value: Any, required_message: str, invalid_message: str) -> date:
    """Date calendaire valide (AAAA-MM-JJ ou horodatage ISO 8601)"""
    if value is None:
        raise ValueError(required_message)
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str):
        raise ValueError(invalid_message)

    text = value.strip()
    try:
        return date.fromisoformat(text)
    except ValueError:
        pass
    try:
        return datetime.fromisoformat(text.replace("Z", "+00:00")).date()
    except ValueError:
        raise ValueError(invalid_message)


def coerce_choice(value: Any, enum_cls: Type[Enum]) -> Enum:
    """Valeur appartenant exactement (casse comprise) à l'énumération"""
    if isinstance(value, enum_cls):
        return value
    allowed = [member.value for member in enum_cls]
    if isinstance(value, str) and value in allowed:
        return enum_cls(value)
    expected = " | ".join(f"'{item}'" for item in allowed)
    raise ValueError(f"Invalid enum value. Expected {expected}, received '{value}'")


def _field_error(coerce: Callable[..., Any], *args: Any) -> Any:
    try:
        return coerce(*args)
    except ValueError as e:
        raise PydanticCustomError("field_error", "{message}", {"message": str(e)})


class CommandeInput(BaseModel):
    """Schéma d'entrée d'une commande (création et remplacement complet)"""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="ignore")

    client: str
    numero_bon_commande: str
    date_livraison: date
    depot: str
    camion: str
    quantite: float
    produit: Produit
    fournisseur: str
    date_chargement: date
    statut: Statut
    transporteur: str
    destination: str
    taux_transport: float

    @field_validator(
        "client", "numero_bon_commande", "depot", "camion",
        "fournisseur", "transporteur", "destination",
        mode="before"
    )
    @classmethod
    def _check_text(cls, value: Any, info: ValidationInfo) -> str:
        return _field_error(require_text, value, REQUIRED_MESSAGES[info.field_name])

    @field_validator("quantite", "taux_transport", mode="before")
    @classmethod
    def _check_positive(cls, value: Any, info: ValidationInfo) -> float:
        return _field_error(coerce_positive_number, value, POSITIVE_MESSAGES[info.field_name])

    @field_validator("date_livraison", "date_chargement", mode="before")
    @classmethod
    def _check_date(cls, value: Any, info: ValidationInfo) -> date:
        return _field_error(
            coerce_calendar_date,
            value,
            REQUIRED_MESSAGES[info.field_name],
            INVALID_DATE_MESSAGES[info.field_name]
        )

    @field_validator("produit", mode="before")
    @classmethod
    def _check_produit(cls, value: Any) -> Produit:
        return _field_error(coerce_choice, value, Produit)

    @field_validator("statut", mode="before")
    @classmethod
    def _check_statut(cls, value: Any) -> Statut:
        return _field_error(coerce_choice, value, Statut)

    def to_domain(self) -> CommandeData:
        return CommandeData(**{name: getattr(self, name) for name in CommandeData.__dataclass_fields__})


_FIELD_BY_ALIAS: Dict[str, str] = {
    field.alias or name: name for name, field in CommandeInput.model_fields.items()
}


def format_validation_error(exc: PydanticValidationError) -> str:
    """Un seul message lisible listant chaque champ en erreur"""
    issues = []
    for error in exc.errors():
        loc = error.get("loc") or ()
        alias = str(loc[0]) if loc else ""
        field = _FIELD_BY_ALIAS.get(alias, alias)
        if error["type"] == "missing":
            message = REQUIRED_MESSAGES.get(field, "Required")
        else:
            message = error["msg"]
        issues.append(f'{message} at "{alias}"' if alias else message)
    return "Validation error: " + "; ".join(issues)


def validate_commande(raw: Any) -> CommandeData:
    """Valide et convertit une charge utile brute, ou lève ValidationError"""
    if not isinstance(raw, Mapping):
        raise ValidationError(f"Validation error: Expected object, received {_type_name(raw)}")
    try:
        commande = CommandeInput.model_validate(dict(raw))
    except PydanticValidationError as e:
        raise ValidationError(format_validation_error(e))
    return commande.to_domain()
