class SessionError(Exception):
    """Base class for session failures reported back to a single client."""

    message = 'Erreur de session.'

    def __init__(self, message=None):
        if message is not None:
            self.message = message
        super().__init__(self.message)


class SessionNotFound(SessionError):
    message = 'Code invalide.'


class SessionFull(SessionError):
    message = 'Partie pleine.'


class AlreadyJoined(SessionError):
    message = 'Déjà dans cette partie.'


class DuplicateCode(SessionError):
    """A code was registered twice. Never shown to clients; the host retries."""

    message = 'Code déjà utilisé.'


class CapacityExhausted(SessionError):
    message = 'Impossible de créer une partie.'
