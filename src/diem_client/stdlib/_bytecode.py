"""
Compiled Move script bytecode for the legacy script dialect.

This file is auto-generated. Do not edit manually.
"""

ADD_CURRENCY_TO_ACCOUNT = bytes.fromhex(
    "a11ceb0b0100000006010002030206040802050a0707111a082b10000000010001010100"
    "0201060c000109000c4c696272614163636f756e740c6164645f63757272656e63790000"
    "000000000000000000000000000101010001030b00380002"
)

ADD_RECOVERY_ROTATION_CAPABILITY = bytes.fromhex(
    "a11ceb0b010000000601000402040403080a05120f07216b088c01100000000100020100"
    "0003000100010402030001060c010800020800050002060c050c4c696272614163636f75"
    "6e740f5265636f7665727941646472657373154b6579526f746174696f6e436170616269"
    "6c6974791f657874726163745f6b65795f726f746174696f6e5f6361706162696c697479"
    "176164645f726f746174696f6e5f6361706162696c697479000000000000000000000000"
    "00000001000403050b0011000a01110102"
)

ADD_TO_SCRIPT_ALLOW_LIST = bytes.fromhex(
    "a11ceb0b010000000501000403040a050e10071e5d087b10000000010002000100010302"
    "010002060c0a020002060c0303060c0a0203204c696272615472616e73616374696f6e50"
    "75626c697368696e674f7074696f6e0c536c6964696e674e6f6e6365186164645f746f5f"
    "7363726970745f616c6c6f775f6c697374157265636f72645f6e6f6e63655f6f725f6162"
    "6f727400000000000000000000000000000001000301070a000a0211010b000b01110002"
)

ADD_VALIDATOR_AND_RECONFIGURE = bytes.fromhex(
    "a11ceb0b010000000501000603060f051518072d5c088901100000000100020103000100"
    "0204020300000504010002060c03000105010a0202060c0504060c030a02050201030b4c"
    "6962726153797374656d0c536c6964696e674e6f6e63650f56616c696461746f72436f6e"
    "666967157265636f72645f6e6f6e63655f6f725f61626f72740e6765745f68756d616e5f"
    "6e616d650d6164645f76616c696461746f72000000000000000000000000000000010005"
    "06120a000a0111000a0311010b02210c040b04030e0b0001060000000000000000270b00"
    "0a03110202"
)

BURN = bytes.fromhex(
    "a11ceb0b010000000601000403040b040f0205111107222e085010000000010102000100"
    "000302010101010402060c030002060c0503060c0305010900054c696272610c536c6964"
    "696e674e6f6e6365157265636f72645f6e6f6e63655f6f725f61626f7274046275726e00"
    "00000000000000000000000000000101010301070a000a0111000b000a02380002"
)

BURN_TXN_FEES = bytes.fromhex(
    "a11ceb0b0100000006010002030206040802050a07071119082a10000000010001010100"
    "0201060c000109000e5472616e73616374696f6e466565096275726e5f66656573000000"
    "0000000000000000000000000101010001030b00380002"
)

CANCEL_BURN = bytes.fromhex(
    "a11ceb0b0100000006010002030206040802050a08071219082b10000000010001010100"
    "0202060c05000109000c4c696272614163636f756e740b63616e63656c5f6275726e0000"
    "000000000000000000000000000101010001040b000a01380002"
)

CREATE_CHILD_VASP_ACCOUNT = bytes.fromhex(
    "a11ceb0b0100000008010002020204030616041c0405202307437b08be011006ce010400"
    "0000010100000200010101000302030000040401010100050301000006020604060c050a"
    "02010001060c0108000506080005030a020a0205060c050a0201030109000c4c69627261"
    "4163636f756e741257697468647261774361706162696c697479196372656174655f6368"
    "696c645f766173705f6163636f756e741b657874726163745f77697468647261775f6361"
    "706162696c697479087061795f66726f6d1b726573746f72655f77697468647261775f63"
    "61706162696c697479000000000000000000000000000000010a02010001010503190a00"
    "0a010b020a0338000a0406000000000000000024030a05160b0011010c050e050a010a04"
    "0700070038010b05110305180b000102"
)

CREATE_DESIGNATED_DEALER = bytes.fromhex(
    "a11ceb0b010000000601000403040b040f0205111b072c49087510000000010102000100"
    "000302010101010402060c030005060c050a020a020106060c03050a020a02010109000c"
    "4c696272614163636f756e740c536c6964696e674e6f6e6365157265636f72645f6e6f6e"
    "63655f6f725f61626f7274186372656174655f64657369676e617465645f6465616c6572"
    "00000000000000000000000000000001010103010a0a000a0111000b000a020b030b040a"
    "05380002"
)

CREATE_PARENT_VASP_ACCOUNT = bytes.fromhex(
    "a11ceb0b010000000601000403040b040f0205111b072c4b087710000000010102000100"
    "000302010101010402060c030005060c050a020a020106060c03050a020a02010109000c"
    "4c696272614163636f756e740c536c6964696e674e6f6e6365157265636f72645f6e6f6e"
    "63655f6f725f61626f72741a6372656174655f706172656e745f766173705f6163636f75"
    "6e7400000000000000000000000000000001010103010a0a000a0111000b000a020b030b"
    "040a05380002"
)

CREATE_RECOVERY_ADDRESS = bytes.fromhex(
    "a11ceb0b010000000601000402040403080a05120c071e5b087910000000010002010000"
    "03000100010402030001060c01080002060c0800000c4c696272614163636f756e740f52"
    "65636f7665727941646472657373154b6579526f746174696f6e4361706162696c697479"
    "1f657874726163745f6b65795f726f746174696f6e5f6361706162696c69747907707562"
    "6c69736800000000000000000000000000000001000003050a000b001100110102"
)

CREATE_VALIDATOR_ACCOUNT = bytes.fromhex(
    "a11ceb0b010000000501000403040a050e16072449086d10000000010102000100000302"
    "010002060c030004060c050a020a0205060c03050a020a020c4c696272614163636f756e"
    "740c536c6964696e674e6f6e6365157265636f72645f6e6f6e63655f6f725f61626f7274"
    "186372656174655f76616c696461746f725f6163636f756e740000000000000000000000"
    "0000000001000301090a000a0111000b000a020b030b04110102"
)

CREATE_VALIDATOR_OPERATOR_ACCOUNT = bytes.fromhex(
    "a11ceb0b010000000501000403040a050e16072452087610000000010102000100000302"
    "010002060c030004060c050a020a0205060c03050a020a020c4c696272614163636f756e"
    "740c536c6964696e674e6f6e6365157265636f72645f6e6f6e63655f6f725f61626f7274"
    "216372656174655f76616c696461746f725f6f70657261746f725f6163636f756e740000"
    "0000000000000000000000000001000301090a000a0111000b000a020b030b04110102"
)

FREEZE_ACCOUNT = bytes.fromhex(
    "a11ceb0b010000000501000403040a050e0e071c42085e10000000010002000100010302"
    "010002060c050002060c0303060c03050f4163636f756e74467265657a696e670c536c69"
    "64696e674e6f6e63650e667265657a655f6163636f756e74157265636f72645f6e6f6e63"
    "655f6f725f61626f727400000000000000000000000000000001000301070a000a011101"
    "0b000a02110002"
)

MINT_LBR = bytes.fromhex(
    "a11ceb0b010000000601000202020403060f051510072563088801100000000101000002"
    "0001000003010200000403020001060c01080000020608000302060c030c4c6962726141"
    "63636f756e741257697468647261774361706162696c6974791b657874726163745f7769"
    "7468647261775f6361706162696c6974791b726573746f72655f77697468647261775f63"
    "61706162696c6974790a737461706c655f6c627200000000000000000000000000000001"
    "000401090b0011000c020e020a0111020b02110102"
)

PEER_TO_PEER_WITH_METADATA = bytes.fromhex(
    "a11ceb0b010000000701000202020403061004160205181d073561089601100000000101"
    "0000020001000003020301010004010300010501060c0108000506080005030a020a0200"
    "05060c05030a020a020109000c4c696272614163636f756e741257697468647261774361"
    "706162696c6974791b657874726163745f77697468647261775f6361706162696c697479"
    "087061795f66726f6d1b726573746f72655f77697468647261775f6361706162696c6974"
    "7900000000000000000000000000000001010104010c0b0011000c050e050a010a020b03"
    "0b0438000b05110202"
)

PREBURN = bytes.fromhex(
    "a11ceb0b0100000007010002020204030610041602051815072d60088d01100000000101"
    "0000020001000003020301010004010300010501060c01080003060c060800030002060c"
    "030109000c4c696272614163636f756e741257697468647261774361706162696c697479"
    "1b657874726163745f77697468647261775f6361706162696c697479077072656275726e"
    "1b726573746f72655f77697468647261775f6361706162696c6974790000000000000000"
    "0000000000000001010104010a0a0011000c020b000e020a0138000b02110202"
)

PUBLISH_SHARED_ED25519_PUBLIC_KEY = bytes.fromhex(
    "a11ceb0b0100000005010002030205050706070d1f082c100000000100010002060c0a02"
    "0016536861726564456432353531395075626c69634b6579077075626c69736800000000"
    "000000000000000000000001000001040b000b01110002"
)

REGISTER_VALIDATOR_CONFIG = bytes.fromhex(
    "a11ceb0b010000000501000203020505070f07161b0831100000000100010007060c050a"
    "020a020a020a020a02000f56616c696461746f72436f6e6669670a7365745f636f6e6669"
    "6700000000000000000000000000000001000001090b000a010b020b030b040b050b0611"
    "0002"
)

REMOVE_VALIDATOR_AND_RECONFIGURE = bytes.fromhex(
    "a11ceb0b010000000501000603060f051518072d5f088c01100000000100020103000100"
    "0204020300000504010002060c03000105010a0202060c0504060c030a02050201030b4c"
    "6962726153797374656d0c536c6964696e674e6f6e63650f56616c696461746f72436f6e"
    "666967157265636f72645f6e6f6e63655f6f725f61626f72740e6765745f68756d616e5f"
    "6e616d651072656d6f76655f76616c696461746f72000000000000000000000000000000"
    "01000506120a000a0111000a0311010b02210c040b04030e0b0001060000000000000000"
    "270b000a03110202"
)

ROTATE_AUTHENTICATION_KEY = bytes.fromhex(
    "a11ceb0b01000000060100040204040308190521200741af0108f0011000000001000301"
    "000102000100000400020000050304000006020500000706050001060c01050108000106"
    "080001060500020608000a0202060c0a0203080001030c4c696272614163636f756e7406"
    "5369676e65720a616464726573735f6f66154b6579526f746174696f6e4361706162696c"
    "6974791f657874726163745f6b65795f726f746174696f6e5f6361706162696c6974791f"
    "6b65795f726f746174696f6e5f6361706162696c6974795f616464726573731f72657374"
    "6f72655f6b65795f726f746174696f6e5f6361706162696c69747919726f746174655f61"
    "757468656e7469636174696f6e5f6b657900000000000000000000000000000001000708"
    "140a0011010c020e021102140b001100210c030b03030e060000000000000000270e020b"
    "0111040b02110302"
)

ROTATE_AUTHENTICATION_KEY_WITH_NONCE = bytes.fromhex(
    "a11ceb0b0100000006010004020404030814051c170733a00108d3011000000001000301"
    "00010200010000040203000005030100000604010002060c030001060c01080002060800"
    "0a0203060c030a020c4c696272614163636f756e740c536c6964696e674e6f6e63651572"
    "65636f72645f6e6f6e63655f6f725f61626f7274154b6579526f746174696f6e43617061"
    "62696c6974791f657874726163745f6b65795f726f746174696f6e5f6361706162696c69"
    "74791f726573746f72655f6b65795f726f746174696f6e5f6361706162696c6974791972"
    "6f746174655f61757468656e7469636174696f6e5f6b6579000000000000000000000000"
    "000000010005030c0a000a0111000b0011010c030e030b0211030b03110202"
)

ROTATE_AUTHENTICATION_KEY_WITH_NONCE_ADMIN = bytes.fromhex(
    "a11ceb0b0100000006010004020404030814051c190735a00108d5011000000001000301"
    "00010200010000040203000005030100000604010002060c030001060c01080002060800"
    "0a0204060c060c030a020c4c696272614163636f756e740c536c6964696e674e6f6e6365"
    "157265636f72645f6e6f6e63655f6f725f61626f7274154b6579526f746174696f6e4361"
    "706162696c6974791f657874726163745f6b65795f726f746174696f6e5f636170616269"
    "6c6974791f726573746f72655f6b65795f726f746174696f6e5f6361706162696c697479"
    "19726f746174655f61757468656e7469636174696f6e5f6b657900000000000000000000"
    "0000000000010005030c0b000a0211000b0111010c040e040b0311030b04110202"
)

ROTATE_AUTHENTICATION_KEY_WITH_RECOVERY_ADDRESS = bytes.fromhex(
    "a11ceb0b0100000005010002030205050708070f2a0839100000000100010004060c0505"
    "0a02000f5265636f766572794164647265737319726f746174655f61757468656e746963"
    "6174696f6e5f6b657900000000000000000000000000000001000001060b000a010a020b"
    "03110002"
)

ROTATE_DUAL_ATTESTATION_INFO = bytes.fromhex(
    "a11ceb0b010000000501000203020a050c0d07193d085610000000010001000002000100"
    "02060c0a020003060c0a020a020f4475616c4174746573746174696f6e0f726f74617465"
    "5f626173655f75726c1c726f746174655f636f6d706c69616e63655f7075626c69635f6b"
    "657900000000000000000000000000000001000201070a000b0111000b000b02110102"
)

ROTATE_SHARED_ED25519_PUBLIC_KEY = bytes.fromhex(
    "a11ceb0b0100000005010002030205050706070d22082f100000000100010002060c0a02"
    "0016536861726564456432353531395075626c69634b65790a726f746174655f6b657900"
    "000000000000000000000000000001000001040b000b01110002"
)

SET_VALIDATOR_CONFIG_AND_RECONFIGURE = bytes.fromhex(
    "a11ceb0b010000000501000403040a050e13072145086610000000010102000100000302"
    "010007060c050a020a020a020a020a020002060c050b4c6962726153797374656d0f5661"
    "6c696461746f72436f6e6669670a7365745f636f6e6669671d7570646174655f636f6e66"
    "69675f616e645f7265636f6e666967757265000000000000000000000000000000010000"
    "010c0a000a010b020b030b040b050b0611000b000a01110102"
)

SET_VALIDATOR_OPERATOR = bytes.fromhex(
    "a11ceb0b010000000501000403040a050e13072144086510000000010102000100000302"
    "03000105010a0202060c050003060c0a02050201030f56616c696461746f72436f6e6669"
    "671756616c696461746f724f70657261746f72436f6e6669670e6765745f68756d616e5f"
    "6e616d650c7365745f6f70657261746f7200000000000000000000000000000001000405"
    "0f0a0211000b01210c030b03030b0b0001060000000000000000270b000a02110102"
)

SET_VALIDATOR_OPERATOR_WITH_NONCE_ADMIN = bytes.fromhex(
    "a11ceb0b010000000501000603060f05151a072f67089601100000000100020003000100"
    "0204020300010504010002060c03000105010a0202060c0505060c060c030a0205020103"
    "0c536c6964696e674e6f6e63650f56616c696461746f72436f6e6669671756616c696461"
    "746f724f70657261746f72436f6e666967157265636f72645f6e6f6e63655f6f725f6162"
    "6f72740e6765745f68756d616e5f6e616d650c7365745f6f70657261746f720000000000"
    "0000000000000000000001000506120b000a0211000a0411010b03210c050b05030e0b01"
    "01060000000000000000270b010a04110202"
)

TIERED_MINT = bytes.fromhex(
    "a11ceb0b010000000601000403040b040f0205111507263c086210000000010102000100"
    "000302010101010402060c030004060c05030305060c030503030109000c4c6962726141"
    "63636f756e740c536c6964696e674e6f6e6365157265636f72645f6e6f6e63655f6f725f"
    "61626f72740b7469657265645f6d696e7400000000000000000000000000000001010103"
    "01090a000a0111000b000a020a030a04380002"
)

UNFREEZE_ACCOUNT = bytes.fromhex(
    "a11ceb0b010000000501000403040a050e0e071c44086010000000010002000100010302"
    "010002060c050002060c0303060c03050f4163636f756e74467265657a696e670c536c69"
    "64696e674e6f6e636510756e667265657a655f6163636f756e74157265636f72645f6e6f"
    "6e63655f6f725f61626f727400000000000000000000000000000001000301070a000a01"
    "11010b000a02110002"
)

UNMINT_LBR = bytes.fromhex(
    "a11ceb0b010000000601000202020403060f051510072565088a01100000000101000002"
    "0001000003010200000403020001060c01080000020608000302060c030c4c6962726141"
    "63636f756e741257697468647261774361706162696c6974791b657874726163745f7769"
    "7468647261775f6361706162696c6974791b726573746f72655f77697468647261775f63"
    "61706162696c6974790c756e737461706c655f6c62720000000000000000000000000000"
    "0001000401090b0011000c020e020a0111020b02110102"
)

UPDATE_DUAL_ATTESTATION_LIMIT = bytes.fromhex(
    "a11ceb0b010000000501000403040a050e0a071848086010000000010002000100010300"
    "010002060c030003060c03030f4475616c4174746573746174696f6e0c536c6964696e67"
    "4e6f6e6365147365745f6d6963726f6c696272615f6c696d6974157265636f72645f6e6f"
    "6e63655f6f725f61626f727400000000000000000000000000000001000201070a000a01"
    "11010b000a02110002"
)

UPDATE_EXCHANGE_RATE = bytes.fromhex(
    "a11ceb0b0100000007010006020604030a10041a02051c19073564089901100000000100"
    "020000020000030001000204020300010504030101020602030301080002060c03000206"
    "0c080004060c0303030109000c4669786564506f696e743332054c696272610c536c6964"
    "696e674e6f6e6365146372656174655f66726f6d5f726174696f6e616c157265636f7264"
    "5f6e6f6e63655f6f725f61626f7274187570646174655f6c62725f65786368616e67655f"
    "7261746500000000000000000000000000000001010105010b0a000a0111010a020a0311"
    "000c040b000b04380002"
)

UPDATE_LIBRA_VERSION = bytes.fromhex(
    "a11ceb0b010000000501000403040a050e0a071834084c10000000010002000100010300"
    "010002060c030003060c03030c4c6962726156657273696f6e0c536c6964696e674e6f6e"
    "636503736574157265636f72645f6e6f6e63655f6f725f61626f72740000000000000000"
    "0000000000000001000201070a000a0111010b000a02110002"
)

UPDATE_MINTING_ABILITY = bytes.fromhex(
    "a11ceb0b0100000006010002030206040802050a0807121d082f10000000010001010100"
    "0202060c0100010900054c69627261167570646174655f6d696e74696e675f6162696c69"
    "74790000000000000000000000000000000101010001040b000a01380002"
)
