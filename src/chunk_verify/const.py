ERRORS = {
  "E_SIGNATURE": "File does not start with the PNG signature",
  "E_TRUNCATED": "Chunk header, payload or CRC cut short",
  "E_REPAIR_IO": "Could not write corrected CRC",
}
