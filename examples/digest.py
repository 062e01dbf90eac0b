from hmackit import Config, HmacAlgorithm, SecretKeySpec, create_hmac
import logging


# logging.basicConfig(level=logging.DEBUG)
def main():
    hmac = create_hmac(Config(backend="cryptography"))
    key = SecretKeySpec(b"key", HmacAlgorithm.SHA256)
    tag = hmac.digest(key, b"The quick brown fox jumps over the lazy dog")
    print(tag.hex())
    print(hmac.verify(key, b"The quick brown fox jumps over the lazy dog", tag))

    # fresh key, sized for the algorithm
    key = hmac.generate_key(HmacAlgorithm.SHA512)
    print(key, hmac.digest(key, b"").hex())


main()
