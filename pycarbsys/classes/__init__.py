from .classes import (k12_method, kso4_method, kf_method, boron_method, ph_scale, param_type, class_dic,
                      CarbonateSystemError, MissingParameters, DuplicateParameterType, InvalidFormulation,
                      UnsupportedParameterPair, InconsistentInputs, SolverDidNotConverge)
