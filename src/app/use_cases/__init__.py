"""Use cases — orquestração independente de transporte HTTP."""
