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

# Carbonate speciation from DIC and Total scale pH.
# Concentrations in µmol/kg, pCO2 in µatm, equilibrium constants in mol/kg.

from dataclasses import dataclass, asdict

from pycarbsys.constants import UMOL
from pycarbsys.shared_fns import h_from_ph

def _denom(h, k):
    return h * h + k.K1 * h + k.K1 * k.K2

def co2_from_dic(dic: float, ph: float, k) -> float:
    """ Returns aqueous CO2 (µmol/kg) from DIC (µmol/kg) and pH (Total) """
    h = h_from_ph(ph)
    return dic * h * h / _denom(h, k)

def hco3_from_dic(dic: float, ph: float, k) -> float:
    """ Returns bicarbonate (µmol/kg) from DIC (µmol/kg) and pH (Total) """
    h = h_from_ph(ph)
    return dic * k.K1 * h / _denom(h, k)

def co3_from_dic(dic: float, ph: float, k) -> float:
    """ Returns carbonate (µmol/kg) from DIC (µmol/kg) and pH (Total) """
    h = h_from_ph(ph)
    return dic * k.K1 * k.K2 / _denom(h, k)

def pco2_from_aqco2(aqco2: float, k) -> float:
    """ Returns pCO2 (µatm) from aqueous CO2 (µmol/kg) """
    return aqco2 / (k.K0 * k.fugacityCoefficient)

def aqco2_from_pco2(pco2: float, k) -> float:
    """ Returns aqueous CO2 (µmol/kg) from pCO2 (µatm) """
    return pco2 * k.K0 * k.fugacityCoefficient

def pco2_from_dic(dic: float, ph: float, k) -> float:
    """ Returns pCO2 (µatm) from DIC (µmol/kg) and pH (Total) """
    return pco2_from_aqco2(co2_from_dic(dic, ph, k), k)

def dic_from_co2(co2: float, ph: float, k) -> float:
    """ Returns DIC (µmol/kg) from aqueous CO2 (µmol/kg) and pH (Total) """
    h = h_from_ph(ph)
    return co2 * _denom(h, k) / (h * h)

def dic_from_hco3(hco3: float, ph: float, k) -> float:
    """ Returns DIC (µmol/kg) from bicarbonate (µmol/kg) and pH (Total) """
    h = h_from_ph(ph)
    return hco3 * _denom(h, k) / (k.K1 * h)

def dic_from_co3(co3: float, ph: float, k) -> float:
    """ Returns DIC (µmol/kg) from carbonate (µmol/kg) and pH (Total) """
    h = h_from_ph(ph)
    return co3 * _denom(h, k) / (k.K1 * k.K2)

def dic_from_pco2(pco2: float, ph: float, k) -> float:
    """ Returns DIC (µmol/kg) from pCO2 (µatm) and pH (Total) """
    return dic_from_co2(aqco2_from_pco2(pco2, k), ph, k)

def carbonate_fractions(ph: float, k):
    """ Returns (fCO2, fHCO3, fCO3) mole fractions of DIC at pH (Total) """
    h = h_from_ph(ph)
    d = _denom(h, k)
    return h * h / d, k.K1 * h / d, k.K1 * k.K2 / d

@dataclass
class MinorSpecies:
    """ Non-carbonate acid-base species (µmol/kg) """
    borate: float
    hydroxide: float
    hydrogenFree: float
    bisulfate: float
    hydrogenFluoride: float
    H3PO4: float
    H2PO4: float
    HPO4: float
    PO4: float
    SiOH4: float
    SiOOH3: float

    def alkalinity(self) -> float:
        """ Non-carbonate contribution to total alkalinity (µmol/kg) """
        return (self.borate + self.hydroxide - self.hydrogenFree - self.bisulfate - self.hydrogenFluoride
                + self.HPO4 + 2 * self.PO4 - self.H3PO4 + self.SiOOH3)

    def to_dict(self):
        return asdict(self)

def minor_species(ph: float, k) -> MinorSpecies:
    """ Returns MinorSpecies at pH (Total) using constants k """
    h = h_from_ph(ph)
    hfree = h / (1 + k.totalSulfate / k.KSO4)

    kp1, kp2, kp3 = k.KP1, k.KP2, k.KP3
    pdenom = h ** 3 + kp1 * h ** 2 + kp1 * kp2 * h + kp1 * kp2 * kp3
    tp = k.totalPhosphate

    return MinorSpecies(
        borate=k.totalBoron * k.KB / (k.KB + h) * UMOL,
        hydroxide=k.KW / h * UMOL,
        hydrogenFree=hfree * UMOL,
        bisulfate=k.totalSulfate * hfree / (k.KSO4 + hfree) * UMOL,
        hydrogenFluoride=k.totalFluoride * hfree / (k.KF + hfree) * UMOL,
        H3PO4=tp * h ** 3 / pdenom * UMOL,
        H2PO4=tp * kp1 * h ** 2 / pdenom * UMOL,
        HPO4=tp * kp1 * kp2 * h / pdenom * UMOL,
        PO4=tp * kp1 * kp2 * kp3 / pdenom * UMOL,
        SiOH4=k.totalSilicate * h / (h + k.KSi) * UMOL,
        SiOOH3=k.totalSilicate * k.KSi / (h + k.KSi) * UMOL,
    )

def alkalinity(ph: float, dic: float, k) -> float:
    """ Returns total alkalinity (µmol/kg) from pH (Total) and DIC (µmol/kg) """
    _, f_hco3, f_co3 = carbonate_fractions(ph, k)
    return dic * (f_hco3 + 2 * f_co3) + minor_species(ph, k).alkalinity()

def dic_from_ta(ph: float, ta: float, k) -> float:
    """ Returns DIC (µmol/kg) from pH (Total) and total alkalinity (µmol/kg) """
    _, f_hco3, f_co3 = carbonate_fractions(ph, k)
    return (ta - minor_species(ph, k).alkalinity()) / (f_hco3 + 2 * f_co3)
