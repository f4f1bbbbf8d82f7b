import threading

STRIPES = 64

_stripes = [threading.Lock() for _ in range(STRIPES)]


def keyed_lock(namespace, key):
    """
    (namespace, key) için sabit havuzdan bir threading.Lock döner.

    Aynı anahtar her zaman aynı kilidi alır; farklı anahtarlar kilit
    paylaşabilir. Havuz boyutu sabit, kullanıcı sayısıyla büyümez.
    Kilitler iç içe alınmamalıdır.
    """
    return _stripes[hash((namespace, key)) % STRIPES]
