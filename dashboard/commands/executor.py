from typing import Optional

from core.commands.upload import UploadCommands

mapping = {
    "upload": UploadCommands,
}


class Executor:
    def __init__(self, service: str, session_key: Optional[str] = None):
        self.service = service
        self.session_key = session_key

    def get_command(self, namespace):
        KlassCommand = mapping[namespace]
        return KlassCommand(self.service, self.session_key)
