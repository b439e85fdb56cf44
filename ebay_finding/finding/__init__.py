"""Finding service operations: validation, dispatch, normalisation and parsing."""
