# web/services/
# ---------------------------------------------------------------------------
# İş mantığı katmanı — msm_floorplan ile köprü, bellek içi veri deposu.
#
# İçermeli:
#   - Seed JSON'dan beslenen birim deposu (salt okunur)
#   - Etap başına kat planı veri setlerinin önbelleği
#   - Lokasyon tablosunun yüklenmesi
#
# İçermemeli:
#   - HTTP/route detayları (api/ tarafında)
#   - CSV ayrıştırma ve hesaplama (msm_floorplan tarafında)
# ---------------------------------------------------------------------------
