# Ошибки миссий


class MissionError(Exception):
    pass


class ValidationError(MissionError):
    # неверный ввод, до базы не доходит
    pass


class StorageError(MissionError):
    # любая ошибка sqlite при открытии/чтении/записи
    pass
