# Worked example from J. Orlin Grabbe, "The DES Algorithm Illustrated"
PLAINTEXT = "0123456789ABCDEF"
KEY = "133457799BBCDFF1"
CIPHERTEXT = "85E813540F0AB405"
