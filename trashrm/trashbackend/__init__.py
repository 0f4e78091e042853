from trashrm.trashbackend.base import TrashBackend
from trashrm.trashbackend.send2trash_backend import Send2TrashBackend
