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

# pH scales
#   Free:  [H+]F, the free proton concentration
#   Total: [H+]T = [H+]F + [HSO4-]
#   SWS:   [H+]SWS = [H+]F + [HSO4-] + [HF]
#   NBS:   aH = fH.[H+]SWS, activity referenced to NBS buffers
#
# Factors below multiply [H+] on the first scale to give [H+] on the second.
# KSO4 and KF are Free scale constants, so every factor derives from the Free scale.

from pycarbsys.classes import ph_scale
from pycarbsys.validate import validate_methods
from pycarbsys.shared_fns import h_from_ph, ph_from_h

def free_to_total(k) -> float:
    return 1 + k.totalSulfate / k.KSO4

def free_to_sws(k) -> float:
    return 1 + k.totalSulfate / k.KSO4 + k.totalFluoride / k.KF

def sws_to_nbs(k) -> float:
    return k.fH

def total_to_free(k) -> float:
    return 1 / free_to_total(k)

def sws_to_free(k) -> float:
    return 1 / free_to_sws(k)

def nbs_to_sws(k) -> float:
    return 1 / sws_to_nbs(k)

def total_to_sws(k) -> float:
    return total_to_free(k) * free_to_sws(k)

def sws_to_total(k) -> float:
    return sws_to_free(k) * free_to_total(k)

def total_to_nbs(k) -> float:
    return total_to_sws(k) * sws_to_nbs(k)

def nbs_to_total(k) -> float:
    return nbs_to_sws(k) * sws_to_total(k)

def free_to_nbs(k) -> float:
    return free_to_sws(k) * sws_to_nbs(k)

def nbs_to_free(k) -> float:
    return nbs_to_sws(k) * sws_to_free(k)

SCALE_FACTORS = {
    (ph_scale.free, ph_scale.total): free_to_total,
    (ph_scale.free, ph_scale.sws): free_to_sws,
    (ph_scale.free, ph_scale.nbs): free_to_nbs,
    (ph_scale.total, ph_scale.free): total_to_free,
    (ph_scale.total, ph_scale.sws): total_to_sws,
    (ph_scale.total, ph_scale.nbs): total_to_nbs,
    (ph_scale.sws, ph_scale.free): sws_to_free,
    (ph_scale.sws, ph_scale.total): sws_to_total,
    (ph_scale.sws, ph_scale.nbs): sws_to_nbs,
    (ph_scale.nbs, ph_scale.free): nbs_to_free,
    (ph_scale.nbs, ph_scale.total): nbs_to_total,
    (ph_scale.nbs, ph_scale.sws): nbs_to_sws,
}

def scale_factor(from_scale, to_scale, k) -> float:
    """ Returns the multiplier converting [H+] from one pH scale to another
        from_scale, to_scale: 'total', 'sws', 'free' or 'nbs'
        k: EquilibriumConstants (uses KSO4, KF, totalSulfate, totalFluoride and fH)
    """
    from_scale, to_scale = validate_methods(["phscale", "phscale"], [from_scale, to_scale])
    if from_scale == to_scale:
        return 1.0
    return SCALE_FACTORS[(from_scale, to_scale)](k)

def convert_h(h: float, from_scale, to_scale, k) -> float:
    """ Returns hydrogen ion concentration (mol/kg) converted between pH scales """
    return h * scale_factor(from_scale, to_scale, k)

def convert_ph(ph: float, from_scale, to_scale, k) -> float:
    """ Returns pH converted between pH scales
        ph: pH on from_scale
        from_scale, to_scale: 'total', 'sws', 'free' or 'nbs'
        k: EquilibriumConstants
    """
    from_scale, to_scale = validate_methods(["phscale", "phscale"], [from_scale, to_scale])
    if from_scale == to_scale:
        return ph
    return ph_from_h(convert_h(h_from_ph(ph), from_scale, to_scale, k))

def ph_all_scales(ph: float, scale, k) -> dict:
    """ Returns dictionary of pH on each of the four scales, keyed 'total', 'sws', 'free' and 'nbs' """
    return {s.name: convert_ph(ph, scale, s, k) for s in ph_scale}
