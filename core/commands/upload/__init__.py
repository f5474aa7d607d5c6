from .upload import UploadCommands
