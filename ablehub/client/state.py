import logging
import threading
from concurrent.futures import ThreadPoolExecutor
from enum import Enum
from ablehub.client.api_client import SettingsClientError
from ablehub.client.flags import AccessibilityFlags, FLAG_NAMES

logger = logging.getLogger(__name__)


class SyncStatus(Enum):
    CONFIRMED = 'confirmed'
    PENDING = 'pending'
    FAILED = 'failed'


class AccessibilityState:
    """
    Mevcut kullanıcının bayraklarının istemci tarafındaki tek kaynağı.

    load() bir kez okur. update_one/update_many yerel durumu hemen (iyimser)
    değiştirir, ardından birleşik bayrak setinin tamamını arka planda yazar.
    Yazma hatası geri alınmaz: error dolar, alan FAILED olarak işaretlenir.
    """

    def __init__(self, api, executor=None):
        self._api = api
        self._owns_executor = executor is None
        self._executor = executor or ThreadPoolExecutor(max_workers=4, thread_name_prefix='accessibility-sync')
        self._lock = threading.RLock()
        self._listeners = []
        self._loaded = False
        self._write_seq = 0
        self._field_seq = {name: 0 for name in FLAG_NAMES}

        self.flags = AccessibilityFlags()
        self.is_loading = True
        self.error = None
        self.sync_status = {name: SyncStatus.CONFIRMED for name in FLAG_NAMES}

    def subscribe(self, listener):
        self._listeners.append(listener)

        def unsubscribe():
            if listener in self._listeners:
                self._listeners.remove(listener)
        return unsubscribe

    def _notify(self, flags):
        for listener in list(self._listeners):
            listener(flags)

    def load(self):
        with self._lock:
            if self._loaded:
                return self.flags
            self._loaded = True
            self.is_loading = True

        try:
            flags = self._api.fetch()
            error = None
        except (SettingsClientError, KeyError, TypeError, ValueError) as e:
            logger.error("Error fetching accessibility settings: %s", e)
            flags = AccessibilityFlags()
            error = getattr(e, 'message', None) or str(e) or 'Unknown error occurred'

        with self._lock:
            self.flags = flags
            self.error = error
            self.is_loading = False
            if error is None:
                self.sync_status = {name: SyncStatus.CONFIRMED for name in FLAG_NAMES}
        self._notify(flags)
        return flags

    def update_one(self, name, value):
        return self.update_many({name: value})

    def update_many(self, partial):
        with self._lock:
            merged = self.flags.merge(partial)
            self._write_seq += 1
            seq = self._write_seq
            for name in partial:
                self._field_seq[name] = seq
                self.sync_status[name] = SyncStatus.PENDING
            self.flags = merged

        self._notify(merged)
        return self._executor.submit(self._persist, merged, tuple(partial), seq)

    def _persist(self, flags, names, seq):
        try:
            self._api.save(flags)
        except (SettingsClientError, KeyError, TypeError, ValueError) as e:
            logger.error("Error saving accessibility settings: %s", e)
            self._settle(names, seq, SyncStatus.FAILED, getattr(e, 'message', None) or 'Failed to save settings')
            return False
        self._settle(names, seq, SyncStatus.CONFIRMED, None)
        return True

    def _settle(self, names, seq, status, error):
        with self._lock:
            for name in names:
                # Daha yeni bir yazma bu alana dokunduysa durumu o belirler
                if self._field_seq[name] == seq:
                    self.sync_status[name] = status
            if error is not None:
                self.error = error
            elif SyncStatus.FAILED not in self.sync_status.values():
                self.error = None

    def pending(self):
        with self._lock:
            return {name for name, status in self.sync_status.items() if status is SyncStatus.PENDING}

    def close(self):
        if self._owns_executor:
            self._executor.shutdown(wait=True)
