# -*- coding: utf-8 -*-
"""Maximal-length tap sets for Galois LFSRs of 2 to 255 bits.

Taken from "Table of Linear Feedback Shift Registers", Ward & Molteno, 2007.
Every entry yields a period of 2**n - 1. These are well known and therefore
NOT safe for anything where the sequence must be hard to predict; see
http://users.ece.cmu.edu/~koopman/lfsr/ for many more maximal-length taps.

Taps are 1-indexed bit positions, highest first.
"""

max_len_lfsr_taps = {
    2: [2, 1],
    3: [3, 2],
    4: [4, 3],
    5: [5, 4, 3, 2],
    6: [6, 5, 3, 2],
    7: [7, 6, 5, 4],
    8: [8, 6, 5, 4],
    9: [9, 8, 6, 5],
    10: [10, 9, 7, 6],
    11: [11, 10, 9, 7],
    12: [12, 11, 8, 6],
    13: [13, 12, 10, 9],
    14: [14, 13, 11, 9],
    15: [15, 14, 13, 11],
    16: [16, 14, 13, 11],
    17: [17, 16, 15, 14],
    18: [18, 17, 16, 13],
    19: [19, 18, 17, 14],
    20: [20, 19, 16, 14],
    21: [21, 20, 19, 16],
    22: [22, 19, 18, 17],
    23: [23, 22, 20, 18],
    24: [24, 23, 21, 20],
    25: [25, 24, 23, 22],
    26: [26, 25, 24, 20],
    27: [27, 26, 25, 22],
    28: [28, 27, 24, 22],
    29: [29, 28, 27, 25],
    30: [30, 29, 26, 24],
    31: [31, 30, 29, 28],
    32: [32, 30, 26, 25],
    33: [33, 32, 29, 27],
    34: [34, 31, 30, 26],
    35: [35, 34, 28, 27],
    36: [36, 35, 29, 28],
    37: [37, 36, 33, 31],
    38: [38, 37, 33, 32],
    39: [39, 38, 35, 32],
    40: [40, 37, 36, 35],
    41: [41, 40, 39, 38],
    42: [42, 40, 37, 35],
    43: [43, 42, 38, 37],
    44: [44, 42, 39, 38],
    45: [45, 44, 42, 41],
    46: [46, 40, 39, 38],
    47: [47, 46, 43, 42],
    48: [48, 44, 41, 39],
    49: [49, 45, 44, 43],
    50: [50, 48, 47, 46],
    51: [51, 50, 48, 45],
    52: [52, 51, 49, 46],
    53: [53, 52, 51, 47],
    54: [54, 51, 48, 46],
    55: [55, 54, 53, 49],
    56: [56, 54, 52, 49],
    57: [57, 55, 54, 52],
    58: [58, 57, 53, 52],
    59: [59, 57, 55, 52],
    60: [60, 58, 56, 55],
    61: [61, 60, 59, 56],
    62: [62, 59, 57, 56],
    63: [63, 62, 59, 58],
    64: [64, 63, 61, 60],
    65: [65, 64, 62, 61],
    66: [66, 60, 58, 57],
    67: [67, 66, 65, 62],
    68: [68, 67, 63, 61],
    69: [69, 67, 64, 63],
    70: [70, 69, 67, 65],
    71: [71, 70, 68, 66],
    72: [72, 69, 63, 62],
    73: [73, 71, 70, 69],
    74: [74, 71, 70, 67],
    75: [75, 74, 72, 69],
    76: [76, 74, 72, 71],
    77: [77, 75, 72, 71],
    78: [78, 77, 76, 71],
    79: [79, 77, 76, 75],
    80: [80, 78, 76, 71],
    81: [81, 79, 78, 75],
    82: [82, 78, 76, 73],
    83: [83, 81, 79, 76],
    84: [84, 83, 77, 75],
    85: [85, 84, 83, 77],
    86: [86, 84, 81, 80],
    87: [87, 86, 82, 80],
    88: [88, 80, 79, 77],
    89: [89, 86, 84, 83],
    90: [90, 88, 87, 85],
    91: [91, 90, 86, 83],
    92: [92, 90, 87, 86],
    93: [93, 91, 90, 87],
    94: [94, 93, 89, 88],
    95: [95, 94, 90, 88],
    96: [96, 90, 87, 86],
    97: [97, 95, 93, 91],
    98: [98, 97, 91, 90],
    99: [99, 95, 94, 92],
    100: [100, 98, 93, 92],
    101: [101, 100, 95, 94],
    102: [102, 99, 97, 96],
    103: [103, 102, 99, 94],
    104: [104, 103, 94, 93],
    105: [105, 104, 99, 98],
    106: [106, 105, 101, 100],
    107: [107, 105, 99, 98],
    108: [108, 103, 97, 96],
    109: [109, 107, 105, 104],
    110: [110, 109, 106, 104],
    111: [111, 109, 107, 104],
    112: [112, 108, 106, 101],
    113: [113, 111, 110, 108],
    114: [114, 113, 112, 103],
    115: [115, 110, 108, 107],
    116: [116, 114, 111, 110],
    117: [117, 116, 115, 112],
    118: [118, 116, 113, 112],
    119: [119, 116, 111, 110],
    120: [120, 118, 114, 111],
    121: [121, 120, 116, 113],
    122: [122, 121, 120, 116],
    123: [123, 122, 119, 115],
    124: [124, 119, 118, 117],
    125: [125, 120, 119, 118],
    126: [126, 124, 122, 119],
    127: [127, 126, 124, 120],
    128: [128, 127, 126, 121],
    129: [129, 128, 125, 124],
    130: [130, 129, 128, 125],
    131: [131, 129, 128, 123],
    132: [132, 130, 127, 123],
    133: [133, 131, 125, 124],
    134: [134, 133, 129, 127],
    135: [135, 132, 131, 129],
    136: [136, 134, 133, 128],
    137: [137, 136, 133, 126],
    138: [138, 137, 131, 130],
    139: [139, 136, 134, 131],
    140: [140, 139, 136, 132],
    141: [141, 140, 135, 128],
    142: [142, 141, 139, 132],
    143: [143, 141, 140, 138],
    144: [144, 142, 140, 137],
    145: [145, 144, 140, 139],
    146: [146, 144, 143, 141],
    147: [147, 145, 143, 136],
    148: [148, 145, 143, 141],
    149: [149, 142, 140, 139],
    150: [150, 148, 147, 142],
    151: [151, 150, 149, 148],
    152: [152, 150, 149, 146],
    153: [153, 149, 148, 145],
    154: [154, 153, 149, 145],
    155: [155, 151, 150, 148],
    156: [156, 153, 151, 147],
    157: [157, 155, 152, 151],
    158: [158, 153, 152, 150],
    159: [159, 156, 153, 148],
    160: [160, 158, 157, 155],
    161: [161, 159, 158, 155],
    162: [162, 158, 155, 154],
    163: [163, 160, 157, 156],
    164: [164, 159, 158, 152],
    165: [165, 162, 157, 156],
    166: [166, 164, 163, 156],
    167: [167, 165, 163, 161],
    168: [168, 162, 159, 152],
    169: [169, 164, 163, 161],
    170: [170, 169, 166, 161],
    171: [171, 169, 166, 165],
    172: [172, 169, 165, 161],
    173: [173, 171, 168, 165],
    174: [174, 169, 166, 165],
    175: [175, 173, 171, 169],
    176: [176, 167, 165, 164],
    177: [177, 175, 174, 172],
    178: [178, 176, 171, 170],
    179: [179, 178, 177, 175],
    180: [180, 173, 170, 168],
    181: [181, 180, 175, 174],
    182: [182, 181, 176, 174],
    183: [183, 179, 176, 175],
    184: [184, 177, 176, 175],
    185: [185, 184, 182, 177],
    186: [186, 180, 178, 177],
    187: [187, 182, 181, 180],
    188: [188, 186, 183, 182],
    189: [189, 187, 184, 183],
    190: [190, 188, 184, 177],
    191: [191, 187, 185, 184],
    192: [192, 190, 178, 177],
    193: [193, 189, 186, 184],
    194: [194, 192, 191, 190],
    195: [195, 193, 192, 187],
    196: [196, 194, 187, 185],
    197: [197, 195, 193, 188],
    198: [198, 193, 190, 183],
    199: [199, 198, 195, 190],
    200: [200, 198, 197, 195],
    201: [201, 199, 198, 195],
    202: [202, 198, 196, 195],
    203: [203, 202, 196, 195],
    204: [204, 201, 200, 194],
    205: [205, 203, 200, 196],
    206: [206, 201, 197, 196],
    207: [207, 206, 201, 198],
    208: [208, 207, 205, 199],
    209: [209, 207, 206, 204],
    210: [210, 207, 206, 198],
    211: [211, 203, 201, 200],
    212: [212, 209, 208, 205],
    213: [213, 211, 208, 207],
    214: [214, 213, 211, 209],
    215: [215, 212, 210, 209],
    216: [216, 215, 213, 209],
    217: [217, 213, 212, 211],
    218: [218, 217, 211, 210],
    219: [219, 218, 215, 211],
    220: [220, 211, 210, 208],
    221: [221, 219, 215, 213],
    222: [222, 220, 217, 214],
    223: [223, 221, 219, 218],
    224: [224, 222, 217, 212],
    225: [225, 224, 220, 215],
    226: [226, 223, 219, 216],
    227: [227, 223, 218, 217],
    228: [228, 226, 217, 216],
    229: [229, 228, 225, 219],
    230: [230, 224, 223, 222],
    231: [231, 229, 227, 224],
    232: [232, 228, 223, 221],
    233: [233, 232, 229, 224],
    234: [234, 232, 225, 223],
    235: [235, 234, 229, 226],
    236: [236, 229, 228, 226],
    237: [237, 236, 233, 230],
    238: [238, 237, 236, 233],
    239: [239, 238, 232, 227],
    240: [240, 237, 235, 232],
    241: [241, 237, 233, 232],
    242: [242, 241, 236, 231],
    243: [243, 242, 238, 235],
    244: [244, 243, 240, 235],
    245: [245, 244, 241, 239],
    246: [246, 245, 244, 235],
    247: [247, 245, 243, 238],
    248: [248, 238, 234, 233],
    249: [249, 248, 245, 242],
    250: [250, 247, 245, 240],
    251: [251, 249, 247, 244],
    252: [252, 251, 247, 241],
    253: [253, 252, 247, 246],
    254: [254, 253, 252, 247],
    255: [255, 253, 252, 250],
}
