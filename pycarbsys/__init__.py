"""
pycarbsys
===================================

-----------------------------------------------------------
Seawater carbonate system (CO2SYS) equilibrium calculations
-----------------------------------------------------------

Computes the full marine carbonate system from any two of pH, total alkalinity (TA),
dissolved inorganic carbon (DIC), pCO2, carbonate (CO3), bicarbonate (HCO3) and aqueous CO2,
at a given temperature, salinity and pressure.

Includes functions to;

- Calculate equilibrium constants with a choice of 18 K1/K2 literature formulations,
  two KSO4, two KF and four total boron formulations, with pressure corrections
- Check temperature / salinity validity ranges of each formulation
- Convert pH and [H+] between the Total, Seawater, Free and NBS scales
- Speciate DIC, and calculate borate, hydroxide, sulfate, fluoride, phosphate and silicate species
- Solve pH from any two non-pH parameters (closed form or Newton-Raphson)
- Calculate calcite and aragonite saturation states, and the Revelle factor
- Process time series of inputs into a pandas DataFrame

Units: concentrations µmol/kg, pCO2 µatm, pressure bar (gauge), temperature deg C, salinity PSU

"""

submodules = [
    'carbonate',
    'classes',
    'constants',
    'equilibrium',
    'phscale',
    'shared_fns',
    'solver',
    'speciation',
    'validate'
]

__all__ = submodules 

import importlib

def __dir__():
    return __all__


def __getattr__(name):
    if name in submodules:
        return importlib.import_module(f'pycarbsys.{name}')
    else:
        try:
            return globals()[name]
        except KeyError:
            raise AttributeError(
                f"Module 'pycarbsys' has no attribute '{name}'"
            )
