from .constants import CEL2KEL, R, R_ATM, ATM2BAR, VM_CO2, CL_PER_S, MW_SO4, MW_F, MW_CA, UMOL, PRESSURE_PARAMS
