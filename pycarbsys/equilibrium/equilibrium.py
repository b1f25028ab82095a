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
from dataclasses import dataclass, asdict

import numpy as np

from pycarbsys.classes import k12_method, kso4_method, kf_method, boron_method
from pycarbsys.validate import validate_methods
from pycarbsys.shared_fns import sal_terms, degc_to_k
from pycarbsys.constants import R, R_ATM, ATM2BAR, VM_CO2, CL_PER_S, MW_SO4, MW_F, MW_CA, PRESSURE_PARAMS
from pycarbsys.equilibrium._lib_k12 import K12_FUNCTIONS
from pycarbsys.equilibrium._lib_formulations import (K12_FORMULATIONS, KSO4_FORMULATIONS, KF_FORMULATIONS,
                                                     BORON_FORMULATIONS, check_formulation_range)

logger = logging.getLogger(__name__)

def k0(degc: float, sal: float) -> float:
    """ Returns CO2 solubility K0 (mol/kg/atm), Weiss (1974)
        degc: Temperature (deg C)
        sal: Salinity (PSU)
    """
    t100 = degc_to_k(degc) / 100
    lnk0 = -60.2409 + 93.4517 / t100 + 23.3585 * np.log(t100) + sal * (0.023517 - 0.023656 * t100 + 0.0047036 * t100 ** 2)
    return np.exp(lnk0)

def fugacity_coeff(degc: float, p_atm: float = 1.0) -> float:
    """ Returns CO2 fugacity coefficient (fCO2/pCO2), Weiss (1974) virial approximation
        degc: Temperature (deg C)
        p_atm: Total pressure (atm). Defaults to 1
    """
    tk = degc_to_k(degc)
    b = -1636.75 + 12.0408 * tk - 0.0327957 * tk ** 2 + 3.16528e-5 * tk ** 3
    delta = 57.7 - 0.118 * tk
    return np.exp((b + 2 * delta) * p_atm / (R_ATM * tk))

def kb(degc: float, sal: float) -> float:
    """ Returns boric acid dissociation constant, Dickson (1990), Total scale """
    tk, lntk, sqrts = sal_terms(degc, sal)
    lnkb = ((-8966.90 - 2890.53 * sqrts - 77.942 * sal + 1.728 * sal * sqrts - 0.0996 * sal ** 2) / tk
            + 148.0248 + 137.1942 * sqrts + 1.62142 * sal
            + (-24.4344 - 25.085 * sqrts - 0.2474 * sal) * lntk
            + 0.053105 * sqrts * tk)
    return np.exp(lnkb)

def kw(degc: float, sal: float) -> float:
    """ Returns water dissociation constant, Millero (1995), Total scale """
    tk, lntk, sqrts = sal_terms(degc, sal)
    lnkw = (148.96502 - 13847.26 / tk - 23.6521 * lntk
            + (-5.977 + 118.67 / tk + 1.0495 * lntk) * sqrts - 0.01615 * sal)
    return np.exp(lnkw)

def ksp_calcite(degc: float, sal: float) -> float:
    """ Returns calcite stoichiometric solubility product (mol/kg)², Mucci (1983) """
    tk, _, sqrts = sal_terms(degc, sal)
    logk = (-171.9065 - 0.077993 * tk + 2839.319 / tk + 71.595 * np.log10(tk)
            + (-0.77712 + 0.0028426 * tk + 178.34 / tk) * sqrts - 0.07711 * sal + 0.0041249 * sal * sqrts)
    return 10 ** logk

def ksp_aragonite(degc: float, sal: float) -> float:
    """ Returns aragonite stoichiometric solubility product (mol/kg)², Mucci (1983) """
    tk, _, sqrts = sal_terms(degc, sal)
    logk = (-171.945 - 0.077993 * tk + 2903.293 / tk + 71.595 * np.log10(tk)
            + (-0.068393 + 0.0017276 * tk + 88.135 / tk) * sqrts - 0.10018 * sal + 0.0059415 * sal * sqrts)
    return 10 ** logk

def ionic_strength(sal: float) -> float:
    # Approximation used by the KSO4 and KF regressions
    return 0.00147 + 0.01992 * sal + 0.0001 * sal ** 2

def kso4(degc: float, sal: float, kso4method=kso4_method.D90a) -> float:
    """ Returns bisulfate dissociation constant, Free scale
        kso4method: 'D90a' Dickson (1990a), or 'KRCB77' Khoo et al. (1977)
    """
    kso4method = validate_methods(["kso4method"], [kso4method])
    tk = degc_to_k(degc)
    lntk = np.log(tk)
    i = ionic_strength(sal)
    if kso4method == kso4_method.D90a:
        lnk = (-4276.1 / tk + 141.328 - 23.093 * lntk
               + (-13856 / tk + 324.57 - 47.986 * lntk) * np.sqrt(i)
               + (35474 / tk - 771.54 + 114.723 * lntk) * i
               - 2698 / tk * i ** 1.5 + 1776 / tk * i ** 2
               + np.log(1 - 0.001005 * sal))
        return np.exp(lnk)
    pk = 647.59 / tk - 6.3451 + 0.019085 * tk - 0.5208 * np.sqrt(i)
    return 10 ** (-pk) * (1 - 0.001005 * sal)

def kf(degc: float, sal: float, kfmethod=kf_method.DR79) -> float:
    """ Returns hydrogen fluoride dissociation constant, Free scale
        kfmethod: 'DR79' Dickson & Riley (1979), or 'PF87' Perez & Fraga (1987)
    """
    kfmethod = validate_methods(["kfmethod"], [kfmethod])
    tk = degc_to_k(degc)
    if kfmethod == kf_method.DR79:
        lnk = 1590.2 / tk - 12.641 + 1.525 * np.sqrt(ionic_strength(sal)) + np.log(1 - 0.001005 * sal)
    else:
        lnk = 874 / tk - 9.68 + 0.111 * np.sqrt(sal)
    return np.exp(lnk)

def kp123(degc: float, sal: float):
    """ Returns phosphoric acid dissociation constants (KP1, KP2, KP3), Millero (1995) as given in
        Dickson et al. (2007), Total scale
    """
    tk, lntk, sqrts = sal_terms(degc, sal)
    lnkp1 = (-4576.752 / tk + 115.525 - 18.453 * lntk
             + (-106.736 / tk + 0.69171) * sqrts + (-0.65643 / tk - 0.01844) * sal)
    lnkp2 = (-8814.715 / tk + 172.0883 - 27.927 * lntk
             + (-160.340 / tk + 1.3566) * sqrts + (0.37335 / tk - 0.05778) * sal)
    lnkp3 = (-3070.75 / tk - 18.141
             + (17.27039 / tk + 2.81197) * sqrts + (-44.99486 / tk - 0.09984) * sal)
    return np.exp(lnkp1), np.exp(lnkp2), np.exp(lnkp3)

def ksi(degc: float, sal: float) -> float:
    """ Returns silicic acid dissociation constant, Millero (1995) as given in Dickson et al. (2007), Total scale """
    tk, lntk, _ = sal_terms(degc, sal)
    i = 19.924 * sal / (1000 - 1.005 * sal)
    lnk = (-8904.2 / tk + 117.385 - 19.334 * lntk
           + (-458.79 / tk + 3.5913) * np.sqrt(i) + (188.74 / tk - 1.5998) * i
           + (-12.1652 / tk + 0.07871) * i ** 2 + np.log(1 - 0.001005 * sal))
    return np.exp(lnk)

def total_sulfate(sal: float) -> float:
    """ Returns total sulfate (mol/kg), Morris & Riley (1966) """
    return 0.14 / MW_SO4 * sal / CL_PER_S

def total_fluoride(sal: float) -> float:
    """ Returns total fluoride (mol/kg), Riley (1965) """
    return 0.000067 / MW_F * sal / CL_PER_S

def total_boron(sal: float, boronmethod=boron_method.U74) -> float:
    """ Returns total boron (mol/kg)
        boronmethod: 'U74' Uppström (1974), 'LKB10' Lee et al. (2010), 'C65' Culkin (1965), 'KSK18' (2018 calibration)
    """
    boronmethod = validate_methods(["boronmethod"], [boronmethod])
    if boronmethod == boron_method.KSK18:
        return (10.838 * sal + 13.821) / 1e6
    ratio = {boron_method.U74: 0.0004157, boron_method.LKB10: 0.0004326, boron_method.C65: 0.0004106}[boronmethod]
    return ratio * sal / 35

def calcium(sal: float, ca=None) -> float:
    """ Returns calcium (mol/kg). Riley & Tongudai (1967) from salinity unless ca (mmol/kg) is specified """
    if ca is None:
        return 0.02128 / MW_CA * sal / CL_PER_S
    return ca / 1000

def fh(degc: float, sal: float) -> float:
    """ Returns hydrogen ion activity coefficient relating SWS and NBS scales, Peng et al. (1987) """
    tk = degc_to_k(degc)
    return 1.29 - 0.00204 * tk + (0.00046 - 1.48e-6 * tk) * sal ** 2

def pressure_correct(k: float, degc: float, pres: float, params: dict) -> float:
    """ Returns equilibrium constant corrected from 1 atm to pressure, Millero (1995)
        k: Constant at 1 atm
        degc: Temperature (deg C)
        pres: Gauge pressure (bar). No correction applied if <= 0
        params: Dictionary of dV, dK and dKT, eg PRESSURE_PARAMS['K1']
    """
    if pres <= 0:
        return k
    rt = R * degc_to_k(degc)
    dv = params["dV"] + params.get("dKT", 0) * degc
    return k * np.exp(-dv / rt * pres + 0.5 * params["dK"] / rt * pres ** 2)

def k0_pressure_factor(degc: float, pres: float, p_atm: float = 1.0) -> float:
    """ Returns K0 pressure multiplier, Weiss (1974) eq. 5 with a 32.3 cm³/mol partial molar volume
        pres: Gauge pressure (bar)
        p_atm: Atmospheric pressure (atm)
    """
    if pres <= 0:
        return 1.0
    return np.exp((ATM2BAR - (pres + p_atm * ATM2BAR)) * VM_CO2 / (R * degc_to_k(degc)))

def k12(degc: float, sal: float, k12method=k12_method.RRV93):
    """ Returns (K1, K2) on the pH scale of the selected formulation, at 1 atm
        k12method: Formulation code, eg 'RRV93', 'LDK00', 'MGH06', 'PLR18'
    """
    k12method = validate_methods(["k12method"], [k12method])
    return K12_FUNCTIONS[k12method](degc_to_k(degc), sal)

@dataclass(frozen=True)
class EquilibriumConstants:
    """ Equilibrium constant set (mol/kg-SW). K1, K2, KB, KW, KP1-3 and KSi on the Total scale,
        KSO4 and KF on the Free scale. Totals in mol/kg.
    """
    K0: float
    K1: float
    K2: float
    KB: float
    KW: float
    KSO4: float
    KF: float
    KP1: float
    KP2: float
    KP3: float
    KSi: float
    KspCalcite: float
    KspAragonite: float
    totalBoron: float
    totalSulfate: float
    totalFluoride: float
    totalPhosphate: float
    totalSilicate: float
    fH: float
    fugacityCoefficient: float
    temperature: float
    salinity: float
    pressure: float
    k12Formulation: str
    kso4Formulation: str
    kfFormulation: str
    boronFormulation: str
    pressuredKCO2: bool = False

    def to_dict(self):
        return asdict(self)

def _to_total_scale(k, scale, free_to_total, free_to_sws, fh_):
    # K published on SWS or NBS scale -> Total scale
    if scale == 'NBS':
        k = k / fh_
        scale = 'Seawater'
    if scale == 'Seawater':
        k = k * free_to_total / free_to_sws
    return k

def calculate_all_constants(
    degc: float,
    sal: float,
    pres: float = 0,
    k12method=k12_method.RRV93,
    kso4method=kso4_method.D90a,
    kfmethod=kf_method.DR79,
    boronmethod=boron_method.U74,
    tp: float = 0,
    tsi: float = 0,
    pressured_kco2: bool = False,
) -> EquilibriumConstants:
    """ Returns EquilibriumConstants for a temperature, salinity and pressure
        degc: Temperature (deg C)
        sal: Salinity (PSU)
        pres: Gauge pressure (bar). Defaults to 0 (surface)
        k12method: K1/K2 formulation. Defaults to 'RRV93' Roy et al. (1993)
        kso4method: KSO4 formulation. Defaults to 'D90a' Dickson (1990a)
        kfmethod: KF formulation. Defaults to 'DR79' Dickson & Riley (1979)
        boronmethod: Total boron ratio. Defaults to 'U74' Uppström (1974)
        tp: Total phosphate (µmol/kg). Defaults to 0
        tsi: Total silicate (µmol/kg). Defaults to 0
        pressured_kco2: If True, applies Weiss (1974) pressure correction to K0. Defaults to False
    """
    k12method, kso4method, kfmethod, boronmethod = validate_methods(
        ["k12method", "kso4method", "kfmethod", "boronmethod"], [k12method, kso4method, kfmethod, boronmethod])

    formulation = K12_FORMULATIONS[k12method.name]
    check = check_formulation_range(formulation, degc, sal)
    if check['overall'] == 'outside':
        logger.warning("%s is outside its valid range (%s) at T=%g degC, S=%g", k12method.name,
                       formulation.valid_range, degc, sal)

    ks = kso4(degc, sal, kso4method)
    kf_ = kf(degc, sal, kfmethod)
    st, ft = total_sulfate(sal), total_fluoride(sal)
    fh_ = fh(degc, sal)
    free_to_total = 1 + st / ks
    free_to_sws = free_to_total + ft / kf_

    k1, k2 = k12(degc, sal, k12method)
    k1 = _to_total_scale(k1, formulation.scale, free_to_total, free_to_sws, fh_)
    k2 = _to_total_scale(k2, formulation.scale, free_to_total, free_to_sws, fh_)
    kp1, kp2, kp3 = kp123(degc, sal)

    k0_ = k0(degc, sal)
    if pressured_kco2:
        k0_ *= k0_pressure_factor(degc, pres)

    return EquilibriumConstants(
        K0=k0_,
        K1=pressure_correct(k1, degc, pres, PRESSURE_PARAMS["K1"]),
        K2=pressure_correct(k2, degc, pres, PRESSURE_PARAMS["K2"]),
        KB=pressure_correct(kb(degc, sal), degc, pres, PRESSURE_PARAMS["KB"]),
        KW=pressure_correct(kw(degc, sal), degc, pres, PRESSURE_PARAMS["KW"]),
        KSO4=ks,
        KF=kf_,
        KP1=kp1,
        KP2=kp2,
        KP3=kp3,
        KSi=ksi(degc, sal),
        KspCalcite=pressure_correct(ksp_calcite(degc, sal), degc, pres, PRESSURE_PARAMS["KspCalcite"]),
        KspAragonite=pressure_correct(ksp_aragonite(degc, sal), degc, pres, PRESSURE_PARAMS["KspAragonite"]),
        totalBoron=total_boron(sal, boronmethod),
        totalSulfate=st,
        totalFluoride=ft,
        totalPhosphate=tp / 1e6,
        totalSilicate=tsi / 1e6,
        fH=fh_,
        fugacityCoefficient=fugacity_coeff(degc),
        temperature=degc,
        salinity=sal,
        pressure=pres,
        k12Formulation=k12method.name,
        kso4Formulation=kso4method.name,
        kfFormulation=kfmethod.name,
        boronFormulation=boronmethod.name,
        pressuredKCO2=pressured_kco2,
    )
