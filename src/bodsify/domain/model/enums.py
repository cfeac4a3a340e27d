"""Domain enums (pure, dependency-light)."""

from __future__ import annotations

from enum import StrEnum


class StatementType(StrEnum):
    """Typed discriminator for the closed set of statement variants."""

    ENTITY = "entityStatement"
    PERSON = "personStatement"
    OWNERSHIP_OR_CONTROL = "ownershipOrControlStatement"


class EntityType(StrEnum):
    REGISTERED_ENTITY = "registeredEntity"
    LEGAL_ENTITY = "legalEntity"
    ARRANGEMENT = "arrangement"
    ANONYMOUS_ENTITY = "anonymousEntity"
    UNKNOWN_ENTITY = "unknownEntity"
    STATE = "state"
    STATE_BODY = "stateBody"


class PersonType(StrEnum):
    KNOWN_PERSON = "knownPerson"
    ANONYMOUS_PERSON = "anonymousPerson"
    UNKNOWN_PERSON = "unknownPerson"


class AddressType(StrEnum):
    PLACE_OF_BIRTH = "placeOfBirth"
    HOME = "home"
    RESIDENCE = "residence"
    REGISTERED = "registered"
    SERVICE = "service"
    ALTERNATIVE = "alternative"
    BUSINESS = "business"


class NameType(StrEnum):
    LEGAL = "legal"
    TRANSLATION = "translation"
    TRANSLITERATION = "transliteration"
    FORMER = "former"
    ALTERNATIVE = "alternative"
    BIRTH = "birth"
    INDIVIDUAL = "individual"


class InterestType(StrEnum):
    SHAREHOLDING = "shareholding"
    VOTING_RIGHTS = "voting-rights"
    APPOINTMENT_OF_BOARD = "appointment-of-board"
    OTHER_INFLUENCE_OR_CONTROL = "other-influence-or-control"
    SENIOR_MANAGING_OFFICIAL = "senior-managing-official"
    SETTLOR_OF_TRUST = "settlor-of-trust"
    TRUSTEE_OF_TRUST = "trustee-of-trust"
    PROTECTOR_OF_TRUST = "protector-of-trust"
    BENEFICIARY_OF_TRUST = "beneficiary-of-trust"
    OTHER_INFLUENCE_OR_CONTROL_OF_TRUST = "other-influence-or-control-of-trust"
    RIGHTS_TO_SURPLUS_ASSETS_ON_DISSOLUTION = "rights-to-surplus-assets-on-dissolution"
    RIGHTS_TO_PROFIT_OR_INCOME = "rights-to-profit-or-income"
    RIGHTS_GRANTED_BY_CONTRACT = "rights-granted-by-contract"
    CONDITIONAL_RIGHTS_GRANTED_BY_CONTRACT = "conditional-rights-granted-by-contract"


class InterestLevel(StrEnum):
    DIRECT = "direct"
    INDIRECT = "indirect"
    UNKNOWN = "unknown"


class SourceType(StrEnum):
    SELF_DECLARATION = "selfDeclaration"
    OFFICIAL_REGISTER = "officialRegister"
    THIRD_PARTY = "thirdParty"
    PRIMARY_RESEARCH = "primaryResearch"
    VERIFIED = "verified"
