# Error kinds raised by the route planner and the station/line services


class SubwayException(Exception):
    def __init__(self, message: str, code: str = "INTERNAL_ERROR"):
        self.message = message
        self.code = code
        super().__init__(self.message)


class StationNotFoundError(SubwayException):
    def __init__(self, message: str = "Station does not exist"):
        super().__init__(message, code="STATION_NOT_FOUND")


class DuplicateStationError(SubwayException):
    def __init__(self, message: str = "Source and target must be different stations"):
        super().__init__(message, code="DUPLICATE_STATION")


class NoPathError(SubwayException):
    def __init__(self, message: str = "Stations are not connected"):
        super().__init__(message, code="NO_PATH")


class LineNotFoundError(SubwayException):
    def __init__(self, message: str = "Line does not exist"):
        super().__init__(message, code="LINE_NOT_FOUND")


class InvalidSectionError(SubwayException):
    def __init__(self, message: str = "Section cannot be added to this line"):
        super().__init__(message, code="INVALID_SECTION")


class InvalidLineError(SubwayException):
    def __init__(self, message: str = "Line sections do not form a single chain"):
        super().__init__(message, code="INVALID_LINE")


class DuplicateStationNameError(SubwayException):
    def __init__(self, message: str = "A station with this name already exists"):
        super().__init__(message, code="DUPLICATE_STATION_NAME")


class DuplicateLineNameError(SubwayException):
    def __init__(self, message: str = "A line with this name already exists"):
        super().__init__(message, code="DUPLICATE_LINE_NAME")


class StationInUseError(SubwayException):
    def __init__(self, message: str = "Station is still used by a line"):
        super().__init__(message, code="STATION_IN_USE")
