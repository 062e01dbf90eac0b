from hmackit import Config, HmacAlgorithm, create_hmac
import curio
import logging


# logging.basicConfig(level=logging.DEBUG)
async def main():
    hmac = create_hmac(Config(mode="async"))
    key = await hmac.generate_key(HmacAlgorithm.SHA256)
    tasks = []
    for i in range(5):
        tasks.append(await curio.spawn(hmac.digest, key, b"message %d" % i))
    for task in tasks:
        print((await task.join()).hex())


curio.run(main)
