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
"""
Carbonic acid dissociation constant library.

One function per K1/K2 formulation, each returning (K1, K2) in mol/kg-SW on
the pH scale the regression was published on (see _lib_formulations).
All take absolute temperature TK (K) and salinity S (PSU).
"""

import numpy as np

from pycarbsys.classes import k12_method


def _k(pk):
    return 10.0 ** (-pk)


# ====================================================================
# Total scale
# ====================================================================
def k12_rrv93(TK, S):
    """Roy et al. (1993), ln K form."""
    sqrtS, lnTK = np.sqrt(S), np.log(TK)
    dilution = np.log(1 - 0.001005 * S)
    lnK1 = (-2307.1266 / TK + 2.83655 - 1.5529413 * lnTK
            + (-4.0484 / TK - 0.20760841) * sqrtS + 0.08468345 * S - 0.00654208 * sqrtS * S + dilution)
    lnK2 = (-3351.6106 / TK - 9.226508 - 0.2005743 * lnTK
            + (-23.9722 / TK - 0.106901773) * sqrtS + 0.1130822 * S - 0.00846934 * sqrtS * S + dilution)
    return np.exp(lnK1), np.exp(lnK2)


def k12_ldk00(TK, S):
    """Lueker, Dickson & Keeling (2000)."""
    lnTK = np.log(TK)
    pK1 = 3633.86 / TK - 61.2172 + 9.6777 * lnTK - 0.011555 * S + 0.0001152 * S * S
    pK2 = 471.78 / TK + 25.929 - 3.16967 * lnTK - 0.01781 * S + 0.0001122 * S * S
    return _k(pK1), _k(pK2)


def k12_mchp73_dm87_pk(TK, S):
    # Mehrbach et al. (1973) data as refit by Dickson & Millero (1987)
    pK1 = 3670.7 / TK - 62.008 + 9.7944 * np.log(TK) - 0.0118 * S + 0.000116 * S * S
    pK2 = 1394.7 / TK + 4.777 - 0.0184 * S + 0.000118 * S * S
    return pK1, pK2


def k12_mchp73(TK, S):
    """Mehrbach et al. (1973), Lueker et al. (2000) refit."""
    pK1, pK2 = k12_mchp73_dm87_pk(TK, S)
    return _k(pK1), _k(pK2)


def k12_slh20(TK, S):
    """Sulpis, Lauvset & Hagens (2020)."""
    lnTK = np.log(TK)
    pK1 = 8510.63 / TK - 172.4493 + 26.32996 * lnTK - 0.011555 * S + 0.0001152 * S * S
    pK2 = 4226.23 / TK - 59.4636 + 9.60817 * lnTK - 0.01781 * S + 0.0001122 * S * S
    return _k(pK1), _k(pK2)


def k12_sb21(TK, S):
    """Shao & Byrne (2021) K2, with a WMW14 style K1."""
    sqrtS, lnTK = np.sqrt(S), np.log(TK)
    pK10 = -126.34048 + 6320.813 / TK + 19.568224 * lnTK
    A1 = 13.568513 * sqrtS + 0.031645 * S - 5.3834e-5 * S * S
    B1 = -539.2304 * sqrtS - 5.635 * S
    C1 = -2.0901396 * sqrtS
    pK1 = pK10 + A1 + B1 / TK + C1 * lnTK
    pK2 = (116.8067 - 3655.02 / TK - 16.45817 * lnTK + 0.04523 * S - 0.615 * sqrtS
           - 0.0002799 * S * S + 4.969 * S / TK)
    return _k(pK1), _k(pK2)


def k12_plr18(TK, S):
    """Papadimitriou, Loucaides & Rérolle (2018). Cold, hypersaline brines."""
    sqrtS, lnTK = np.sqrt(S), np.log(TK)
    pK1 = (-176.48 + 6.14528 * sqrtS - 0.127714 * S + 7.396e-5 * S * S
           + (9914.37 - 622.886 * sqrtS + 29.714 * S) / TK
           + (26.05129 - 0.666812 * sqrtS) * lnTK)
    pK2 = (-323.52692 + 27.557655 * sqrtS + 0.154922 * S - 2.48396e-4 * S * S
           + (14763.287 - 1014.819 * sqrtS - 14.35223 * S) / TK
           + (50.385807 - 4.4630415 * sqrtS) * lnTK)
    return _k(pK1), _k(pK2)


# ====================================================================
# Seawater scale
# ====================================================================
def k12_gp89(TK, S):
    """Goyet & Poisson (1989)."""
    lnTK = np.log(TK)
    pK1 = 812.27 / TK + 3.356 - 0.00171 * S * lnTK + 0.000091 * S * S
    pK2 = 1450.87 / TK + 4.604 - 0.00385 * S * lnTK + 0.000182 * S * S
    return _k(pK1), _k(pK2)


def k12_h73_dm87(TK, S):
    """Hansson (1973) refit by Dickson & Millero (1987)."""
    pK1 = 851.4 / TK + 3.237 - 0.0106 * S + 0.000105 * S * S
    pK2 = -3885.4 / TK + 125.844 - 18.141 * np.log(TK) - 0.0192 * S + 0.000132 * S * S
    return _k(pK1), _k(pK2)


def k12_mchp73_dm87(TK, S):
    """Mehrbach et al. (1973) refit by Dickson & Millero (1987)."""
    pK1, pK2 = k12_mchp73_dm87_pk(TK, S)
    return _k(pK1), _k(pK2)


def k12_hm_dm87(TK, S):
    """Hansson and Mehrbach combined data, Dickson & Millero (1987)."""
    pK1 = 845 / TK + 3.248 - 0.0098 * S + 0.000087 * S * S
    pK2 = 1377.3 / TK + 4.824 - 0.0185 * S + 0.000122 * S * S
    return _k(pK1), _k(pK2)


def k12_mm02(TK, S):
    """Mojica Prieto & Millero (2002)."""
    lnTK = np.log(TK)
    pK1 = -43.6977 - 0.0129037 * S + 1.364e-4 * S * S + 2885.378 / TK + 7.045159 * lnTK
    pK2 = (-452.0940 + 13.142162 * S - 8.101e-4 * S * S + 21263.61 / TK + 68.483143 * lnTK
           + (-581.4428 * S + 0.259601 * S * S) / TK - 1.967035 * S * lnTK)
    return _k(pK1), _k(pK2)


def k12_mpl02(TK, S):
    """Millero, Pierrot, Lee et al. (2002). Linear in deg C."""
    degc = TK - 273.15
    pK1 = 6.359 - 0.00664 * S - 0.01322 * degc + 4.989e-5 * degc * degc
    pK2 = 9.867 - 0.01314 * S - 0.01904 * degc + 2.448e-5 * degc * degc
    return _k(pK1), _k(pK2)


# Millero (2006, 2010) and Waters et al. (2014) share the pure water terms
# and differ only in the salinity coefficients (A, B, C) for K1 then K2
_MILLERO_FAMILY = {
    k12_method.MGH06: ((13.4191, 0.0331, -5.33e-5, -530.123, -6.103, -2.06950),
                       (21.0894, 0.1248, -3.687e-4, -772.483, -20.051, -3.3336)),
    k12_method.M10: ((13.4038, 0.03206, -5.242e-5, -530.659, -5.8210, -2.0664),
                     (21.3728, 0.1218, -3.688e-4, -788.289, -19.189, -3.374)),
    k12_method.WMW14: ((13.409160, 0.031646, -5.1895e-5, -531.3642, -5.713, -2.0669166),
                       (21.225890, 0.12450870, -3.7243e-4, -779.3444, -19.91739, -3.3534679)),
}


def _millero_pk(pk0, coeffs, TK, S):
    a1, a2, a3, b1, b2, c1 = coeffs
    sqrtS = np.sqrt(S)
    A = a1 * sqrtS + a2 * S + a3 * S * S
    B = b1 * sqrtS + b2 * S
    C = c1 * sqrtS
    return pk0 + A + B / TK + C * np.log(TK)


def k12_millero(method):
    """Returns the (K1, K2) function for MGH06, M10 or WMW14."""
    k1_coeffs, k2_coeffs = _MILLERO_FAMILY[method]

    def k12(TK, S):
        lnTK = np.log(TK)
        pK10 = -126.34048 + 6320.813 / TK + 19.568224 * lnTK
        pK20 = -90.18333 + 5143.692 / TK + 14.613358 * lnTK
        return _k(_millero_pk(pK10, k1_coeffs, TK, S)), _k(_millero_pk(pK20, k2_coeffs, TK, S))
    k12.__name__ = f'k12_{method.name.lower()}'
    return k12


# ====================================================================
# NBS scale
# ====================================================================
def k12_mchp73_geosecs(TK, S):
    """Original GEOSECS fit of Mehrbach et al. (1973)."""
    log10S, log10TK = np.log10(S), np.log10(TK)
    pK1 = -13.7201 + 0.031334 * TK + 3235.76 / TK + 1.3e-5 * S * TK - 0.1032 * np.sqrt(S)
    pK2 = (5371.9645 + 1.671221 * TK + 0.22913 * S + 18.3802 * log10S - 128375.28 / TK
           - 2194.3055 * log10TK - 8.0944e-4 * S * TK - 5617.11 * log10S / TK + 2.136 * S / TK)
    return _k(pK1), _k(pK2)


def k12_cw98(TK, S):
    """Cai & Wang (1998). Estuarine waters."""
    sqrtS = np.sqrt(S)
    F1 = 200.1 / TK + 0.3220
    F2 = -129.24 / TK + 1.4381
    pK1 = 3404.71 / TK + 0.032786 * TK - 14.8435 - 0.071692 * F1 * sqrtS + 0.0021487 * S
    pK2 = 2902.39 / TK + 0.02379 * TK - 6.4980 - 0.3191 * F2 * sqrtS + 0.0198 * S
    return _k(pK1), _k(pK2)


# ====================================================================
# Thermodynamic (freshwater)
# ====================================================================
def k12_m79(TK, S):
    """Millero (1979) pure water. Salinity independent."""
    lnTK = np.log(TK)
    lnK1 = 290.9097 - 14554.21 / TK - 45.0575 * lnTK
    lnK2 = 207.6548 - 11843.79 / TK - 33.6485 * lnTK
    return np.exp(lnK1), np.exp(lnK2)


K12_FUNCTIONS = {
    k12_method.RRV93: k12_rrv93,
    k12_method.GP89: k12_gp89,
    k12_method.H73_DM87: k12_h73_dm87,
    k12_method.MCHP73_DM87: k12_mchp73_dm87,
    k12_method.HM_DM87: k12_hm_dm87,
    k12_method.MCHP73_GEOSECS: k12_mchp73_geosecs,
    k12_method.M79: k12_m79,
    k12_method.CW98: k12_cw98,
    k12_method.LDK00: k12_ldk00,
    k12_method.MM02: k12_mm02,
    k12_method.MPL02: k12_mpl02,
    k12_method.MGH06: k12_millero(k12_method.MGH06),
    k12_method.M10: k12_millero(k12_method.M10),
    k12_method.WMW14: k12_millero(k12_method.WMW14),
    k12_method.SLH20: k12_slh20,
    k12_method.SB21: k12_sb21,
    k12_method.MCHP73: k12_mchp73,
    k12_method.PLR18: k12_plr18,
}
