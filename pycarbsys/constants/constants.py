#!/usr/bin/python3
# -*- coding: utf-8 -*-

"""
    pyCarbSys - Seawater Carbonate System Equilibrium Calculations
              Copyright (C) 2022, Mark Burgoyne

    This program is free software: you can redistribute it and/or modify
    it under the terms of the GNU General Public License as published by
    the Free Software Foundation, either version 3 of the License, or
    (at your option) any later version.

    This program is distributed in the hope that it will be useful,
    but WITHOUT ANY WARRANTY; without even the implied warranty of
    MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
    GNU General Public License for more details.

    The GNU General Public License can be found in the LICENSE directory,
    and at  <https://www.gnu.org/licenses/>.

          Contact author at mark.w.burgoyne@gmail.com
"""


# Constants
CEL2KEL = 273.15  # Offset to convert degrees C to Kelvin
R = 83.1451  # Universal gas constant, cm³·bar/K·mol
R_ATM = 82.057  # Universal gas constant, cm³·atm/K·mol
ATM2BAR = 1.01325  # bar per standard atmosphere
VM_CO2 = 32.3  # Partial molar volume of CO2 in seawater, cm³/mol (Weiss 1974)
CL_PER_S = 1.80655  # Salinity to chlorinity ratio
MW_SO4 = 96.062
MW_F = 18.998
MW_CA = 40.087
UMOL = 1e6  # µmol per mol

# Pressure correction parameters (deltaV cm³/mol, deltaK cm³/mol/bar, deltaKT temperature coefficient of deltaV)
# Millero (1979, 1995) as compiled in CO2SYS
PRESSURE_PARAMS = {
    "K1": {"dV": -25.5, "dK": -0.1271, "dKT": 0.0},
    "K2": {"dV": -15.82, "dK": -0.0219, "dKT": -0.321},
    "KB": {"dV": -29.48, "dK": 0.1622, "dKT": -2.608},
    "KW": {"dV": -25.6, "dK": -0.2324, "dKT": -3.6246},
    "KspCalcite": {"dV": -48.76, "dK": -0.5304, "dKT": 0.0},
    "KspAragonite": {"dV": -46.0, "dK": -0.5304, "dKT": 0.0},
}
