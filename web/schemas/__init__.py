# web/schemas/
# ---------------------------------------------------------------------------
# API response modelleri — birim, firma, blok özeti, ödeme planı, lokasyon.
#
# İçermeli:
#   - Pydantic response modelleri (msm_floorplan nesnelerinin JSON hali)
#   - Alan adı/alias kuralları (seed JSON camelCase)
#
# İçermemeli:
#   - CSV ayrıştırma veya hesaplama (msm_floorplan tarafında)
#   - API route'ları
# ---------------------------------------------------------------------------
