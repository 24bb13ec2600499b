"""HTTP surface for supplement-guard."""
