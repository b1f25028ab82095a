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

import logging

import numpy as np

from pycarbsys.classes import param_type, UnsupportedParameterPair, InconsistentInputs, SolverDidNotConverge
from pycarbsys.validate import validate_methods
from pycarbsys.shared_fns import ph_from_h
from pycarbsys.speciation import (alkalinity, aqco2_from_pco2, dic_from_co2, dic_from_co3, dic_from_hco3,
                                  dic_from_pco2, co2_from_dic, co3_from_dic, hco3_from_dic)

logger = logging.getLogger(__name__)

MAX_ITER = 200
TOL = 1e-9
DPH = 1e-6  # Numerical derivative step (pH units)
MAX_STEP = 1.0
PH_MIN, PH_MAX = 2.0, 12.0
DEFAULT_GUESS = 8.0
CO2_MISMATCH = 0.1  # Allowed fractional disagreement between pCO2 and aqCO2 inputs

TA, DIC, PCO2, CO3, HCO3, AQCO2 = (param_type.TA, param_type.DIC, param_type.pCO2, param_type.CO3,
                                   param_type.HCO3, param_type.aqCO2)

def _pair(a, b):
    return frozenset((a, b))

# ====================================================================
# Closed form pairs. Each returns pH (Total) from {param_type: value}
# ====================================================================
def _co3_hco3(v, k, guess):
    return ph_from_h(k.K2 * v[HCO3] / v[CO3])

def _co3_aqco2(v, k, guess):
    return ph_from_h(np.sqrt(k.K1 * k.K2 * v[AQCO2] / v[CO3]))

def _hco3_aqco2(v, k, guess):
    return ph_from_h(k.K1 * v[AQCO2] / v[HCO3])

def _pco2_co3(v, k, guess):
    return ph_from_h(np.sqrt(k.K1 * k.K2 * aqco2_from_pco2(v[PCO2], k) / v[CO3]))

def _pco2_hco3(v, k, guess):
    return ph_from_h(k.K1 * aqco2_from_pco2(v[PCO2], k) / v[HCO3])

def _pco2_aqco2(v, k, guess):
    # pCO2 and aqCO2 are linked through K0 alone and do not constrain pH
    implied = aqco2_from_pco2(v[PCO2], k)
    mismatch = abs(implied - v[AQCO2]) / v[AQCO2]
    if mismatch > CO2_MISMATCH:
        raise InconsistentInputs(f"pCO2 {v[PCO2]:g} µatm implies aqCO2 {implied:.4g} µmol/kg, "
                                 f"not {v[AQCO2]:g} µmol/kg ({mismatch:.1%} mismatch)")
    return DEFAULT_GUESS if guess is None else guess

_CLOSED_FORMS = {
    _pair(CO3, HCO3): _co3_hco3,
    _pair(CO3, AQCO2): _co3_aqco2,
    _pair(HCO3, AQCO2): _hco3_aqco2,
    _pair(PCO2, CO3): _pco2_co3,
    _pair(PCO2, HCO3): _pco2_hco3,
    _pair(PCO2, AQCO2): _pco2_aqco2,
}

# ====================================================================
# Newton-Raphson pairs. Each returns residual f(pH) = computed - target
# ====================================================================
def _ta_via(dic_fn, other, v, k):
    # dic_fn(value, pH, k) -> DIC for the parameter paired with TA
    def f(ph):
        return alkalinity(ph, dic_fn(v[other], ph, k), k) - v[TA]
    return f

def _ta_dic(v, k):
    return _ta_via(lambda dic, ph, k_: dic, DIC, v, k)

def _ta_pco2(v, k):
    return _ta_via(dic_from_pco2, PCO2, v, k)

def _ta_co3(v, k):
    return _ta_via(dic_from_co3, CO3, v, k)

def _ta_hco3(v, k):
    return _ta_via(dic_from_hco3, HCO3, v, k)

def _ta_aqco2(v, k):
    return _ta_via(dic_from_co2, AQCO2, v, k)

def _dic_pco2(v, k):
    aq = aqco2_from_pco2(v[PCO2], k)
    return lambda ph: co2_from_dic(v[DIC], ph, k) - aq

def _dic_co3(v, k):
    return lambda ph: co3_from_dic(v[DIC], ph, k) - v[CO3]

def _dic_hco3(v, k):
    return lambda ph: hco3_from_dic(v[DIC], ph, k) - v[HCO3]

def _dic_aqco2(v, k):
    return lambda ph: co2_from_dic(v[DIC], ph, k) - v[AQCO2]

_NEWTON_RESIDUALS = {
    _pair(TA, DIC): _ta_dic,
    _pair(TA, PCO2): _ta_pco2,
    _pair(TA, CO3): _ta_co3,
    _pair(TA, HCO3): _ta_hco3,
    _pair(TA, AQCO2): _ta_aqco2,
    _pair(DIC, PCO2): _dic_pco2,
    _pair(DIC, CO3): _dic_co3,
    _pair(DIC, HCO3): _dic_hco3,
    _pair(DIC, AQCO2): _dic_aqco2,
}

def initial_guess(values: dict) -> float:
    """ Returns starting pH for Newton iteration. TA + DIC pairs use the TA/DIC ratio """
    if set(values) != {TA, DIC}:
        return DEFAULT_GUESS
    if values[DIC] <= 0:
        raise InconsistentInputs(f"DIC must be positive to solve pH from TA, got {values[DIC]:g} µmol/kg")
    ratio = values[TA] / values[DIC]
    for limit, guess in ((0.2, 5.0), (0.5, 6.5), (1.0, 7.5), (1.3, 8.0)):
        if ratio < limit:
            return guess
    return 8.5

def newton_ph(residual, guess: float) -> float:
    """ Returns pH where residual(pH) = 0 by Newton-Raphson with a one sided numerical derivative.
        Step limited to +/- 1 pH unit, pH bounded to 2 - 12 between iterations
    """
    ph = guess
    for i in range(MAX_ITER):
        f = residual(ph)
        dfdph = (residual(ph + DPH) - f) / DPH
        if dfdph == 0 or not np.isfinite(dfdph):
            raise SolverDidNotConverge(f"Zero or non-finite derivative at pH {ph:.6f} (iteration {i + 1})")
        step = min(max(-f / dfdph, -MAX_STEP), MAX_STEP)
        ph += step
        if abs(step) < TOL:
            logger.debug("pH %.9f converged after %d iterations", ph, i + 1)
            return ph
        ph = min(max(ph, PH_MIN), PH_MAX)
    raise SolverDidNotConverge(f"pH did not converge within {MAX_ITER} iterations (last pH {ph:.6f})")

def solve_ph(par1_type, par1: float, par2_type, par2: float, k, ph_guess=None) -> float:
    """ Returns pH (Total scale) consistent with two non-pH carbonate system parameters
        par1_type, par2_type: Parameter types, any two of 'TA', 'DIC', 'pCO2', 'CO3', 'HCO3', 'aqCO2'
        par1, par2: Parameter values (µmol/kg, or µatm for pCO2)
        k: EquilibriumConstants
        ph_guess: Starting pH for iterative pairs. Chosen automatically if not specified
    """
    try:
        par1_type, par2_type = validate_methods(["paramtype", "paramtype"], [par1_type, par2_type])
    except ValueError as e:
        raise UnsupportedParameterPair(str(e)) from e
    values = {par1_type: par1, par2_type: par2}
    key = _pair(par1_type, par2_type)

    if key in _CLOSED_FORMS:
        logger.debug("Closed form pH for %s + %s", par1_type.name, par2_type.name)
        return _CLOSED_FORMS[key](values, k, ph_guess)
    if key in _NEWTON_RESIDUALS:
        guess = initial_guess(values) if ph_guess is None else ph_guess
        return newton_ph(_NEWTON_RESIDUALS[key](values, k), guess)
    raise UnsupportedParameterPair(f"No pH solution for parameter pair {par1_type.name} + {par2_type.name}")
