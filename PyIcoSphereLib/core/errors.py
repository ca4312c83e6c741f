class IcosphereError(Exception):
    pass


class SubdivisionLevelError(IcosphereError, ValueError):
    pass


class BaseMeshError(IcosphereError, RuntimeError):
    pass


class MeshValidationError(IcosphereError):
    def __init__(self, problems):
        self.problems = list(problems)
        super().__init__("; ".join(self.problems))
