from .phscale import (free_to_total, free_to_sws, sws_to_nbs, total_to_free, sws_to_free, nbs_to_sws, total_to_sws,
                      sws_to_total, total_to_nbs, nbs_to_total, free_to_nbs, nbs_to_free, SCALE_FACTORS, scale_factor,
                      convert_h, convert_ph, ph_all_scales)
