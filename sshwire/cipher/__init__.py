"""Packet framing and the clear, chacha20-poly1305 and aes256-gcm packet ciphers."""