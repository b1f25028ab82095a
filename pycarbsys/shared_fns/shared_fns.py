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

import numpy as np

from pycarbsys.constants import CEL2KEL

def h_from_ph(ph: float) -> float:
    """ Returns hydrogen ion concentration (mol/kg) from pH """
    return 10.0 ** (-ph)

def ph_from_h(h: float) -> float:
    """ Returns pH from hydrogen ion concentration (mol/kg) """
    return -np.log10(h)

def degc_to_k(degc: float) -> float:
    return degc + CEL2KEL

def sal_terms(degc: float, sal: float):
    # Frequently used regression terms: (TK, ln TK, sqrt S)
    tk = degc_to_k(degc)
    return tk, np.log(tk), np.sqrt(sal)
