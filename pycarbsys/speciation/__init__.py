from .speciation import (co2_from_dic, hco3_from_dic, co3_from_dic, pco2_from_aqco2, aqco2_from_pco2, pco2_from_dic,
                         dic_from_co2, dic_from_hco3, dic_from_co3, dic_from_pco2, carbonate_fractions, MinorSpecies,
                         minor_species, alkalinity, dic_from_ta)
