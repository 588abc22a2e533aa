# web/api/
# ---------------------------------------------------------------------------
# HTTP API katmanı — salt okunur endpoint'ler.
#
# İçermeli:
#   - /api/units (seed birim listesi) route'ları
#   - /api/phases (kat planı veri setleri) ve /api/payment-plan route'ları
#   - /api/locations route'ları
#
# İçermemeli:
#   - CSV ayrıştırma, birleştirme, hesaplama (msm_floorplan'da)
#   - Veri yükleme/önbellek (services/'te)
# ---------------------------------------------------------------------------
