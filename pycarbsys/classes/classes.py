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

from enum import Enum

class k12_method(Enum):  # Carbonic acid K1/K2 formulation
    RRV93 = 0
    GP89 = 1
    H73_DM87 = 2
    MCHP73_DM87 = 3
    HM_DM87 = 4
    MCHP73_GEOSECS = 5
    M79 = 6
    CW98 = 7
    LDK00 = 8
    MM02 = 9
    MPL02 = 10
    MGH06 = 11
    M10 = 12
    WMW14 = 13
    SLH20 = 14
    SB21 = 15
    MCHP73 = 16
    PLR18 = 17

class kso4_method(Enum):  # Bisulfate dissociation constant formulation
    D90a = 0
    KRCB77 = 1

class kf_method(Enum):  # Hydrogen fluoride dissociation constant formulation
    DR79 = 0
    PF87 = 1

class boron_method(Enum):  # Total boron to salinity ratio
    U74 = 0
    LKB10 = 1
    C65 = 2
    KSK18 = 3

class ph_scale(Enum):  # pH scale convention
    total = 0
    sws = 1
    free = 2
    nbs = 3

class param_type(Enum):  # Carbonate system input parameter
    pH = 0
    TA = 1
    DIC = 2
    pCO2 = 3
    CO3 = 4
    HCO3 = 5
    aqCO2 = 6

class_dic = {
    "k12method": k12_method,
    "kso4method": kso4_method,
    "kfmethod": kf_method,
    "boronmethod": boron_method,
    "phscale": ph_scale,
    "paramtype": param_type,
}

class CarbonateSystemError(Exception):
    """ Base class for all carbonate system calculation failures """

class MissingParameters(CarbonateSystemError, ValueError):
    """ Fewer than two input parameters (type and value) were supplied """

class DuplicateParameterType(CarbonateSystemError, ValueError):
    """ Both input parameters are of the same type """

class InvalidFormulation(CarbonateSystemError, ValueError):
    """ An unrecognised formulation or pH scale code was requested """
    def __init__(self, code, family=''):
        self.code = code
        self.family = family
        label = f"{family} " if family else ''
        super().__init__(f"Unknown {label}formulation: {code}")

class UnsupportedParameterPair(CarbonateSystemError, ValueError):
    """ No solution path exists for the combination of parameter types """

class InconsistentInputs(CarbonateSystemError, ValueError):
    """ Supplied parameters contradict each other """

class SolverDidNotConverge(CarbonateSystemError, RuntimeError):
    """ Iterative pH solution failed to converge """
