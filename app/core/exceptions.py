"""
Eccezioni di dominio per squadre/formazioni.
I router le traducono nello status HTTP corrispondente (status_code).
"""


class SquadError(Exception):
    """Base per gli errori del Squad Manager."""

    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(SquadError):
    """Identificativo o campo obbligatorio mancante/malformato."""

    status_code = 400


class NotFoundError(SquadError):
    status_code = 404


class ConflictError(SquadError):
    """Richiesta valida ma stato incompatibile (squadra bloccata, già esistente, scrittura concorrente)."""

    status_code = 409


class SubstitutionPreconditionError(SquadError):
    """Il giocatore in uscita non è tra i titolari, o quello in entrata non è in panchina."""

    status_code = 400
