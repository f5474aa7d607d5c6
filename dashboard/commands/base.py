from typing import Optional

from dashboard.commands.exceptions import MissingService


class BaseCommand:
    def __init__(self, service: str, session_key: Optional[str] = None):
        self.service = service
        self.session_key = session_key

    def get_interactor(self, InteractorKlass):
        return InteractorKlass(service=self.service, session_key=self.session_key)


class BaseInteractor:
    requires_service = True

    def __init__(self, service: str, session_key: Optional[str] = None):
        self.service = service
        self.session_key = session_key

        if not self.service and self.requires_service:
            raise MissingService()
