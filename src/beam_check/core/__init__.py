# Core calculation engine
from .simply_supported import SimplySupportedBeamSolver
from .cantilever import CantileverBeamSolver
from .formulas import BeamFormulas, SIMPLY_SUPPORTED, CANTILEVER
