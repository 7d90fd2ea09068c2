"""Names of the remote procedures exposed by an Idena node."""

# Identity
IDENTITIES = "dna_identities"
IDENTITY = "dna_identity"
EPOCH = "dna_epoch"
CEREMONY_INTERVALS = "dna_ceremonyIntervals"
COINBASE_ADDRESS = "dna_getCoinbaseAddr"
GO_ONLINE = "dna_becomeOnline"
GO_OFFLINE = "dna_becomeOffline"
SEND_INVITE = "dna_sendInvite"
ACTIVATE_INVITE = "dna_activateInvite"
KILL_IDENTITY = "dna_killIdentity"

# Balances and transactions
BALANCE = "dna_getBalance"
SEND_TRANSACTION = "dna_sendTransaction"
TRANSACTION = "bcn_transaction"
TRANSACTIONS = "bcn_transactions"
PENDING_TRANSACTIONS = "bcn_pendingTransactions"

# Flips
FLIP_SHORT_HASHES = "flip_shortHashes"
FLIP_LONG_HASHES = "flip_longHashes"
FLIP_GET = "flip_get"
FLIP_SUBMIT_SHORT_ANSWERS = "flip_submitShortAnswers"
FLIP_SUBMIT_LONG_ANSWERS = "flip_submitLongAnswers"
FLIP_SUBMIT = "flip_submit"

# Node
SYNC_STATUS = "bcn_syncing"
NODE_VERSION = "dna_version"
IMPORT_KEY = "dna_importKey"
EXPORT_KEY = "dna_exportKey"
ENODE = "net_enode"
