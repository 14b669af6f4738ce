"""Payloads of TLS 1.3 handshake extensions."""