from .equilibrium import (k0, fugacity_coeff, kb, kw, ksp_calcite, ksp_aragonite, ionic_strength, kso4, kf, kp123,
                          ksi, total_sulfate, total_fluoride, total_boron, calcium, fh, pressure_correct,
                          k0_pressure_factor, k12, EquilibriumConstants, calculate_all_constants)
from ._lib_formulations import (Formulation, K12_FORMULATIONS, KSO4_FORMULATIONS, KF_FORMULATIONS, BORON_FORMULATIONS,
                                FORMULATION_TABLES, check_formulation_range, recommended_formulations)
