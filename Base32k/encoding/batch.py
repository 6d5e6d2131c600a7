"""
Batch encoding and decoding of word sequences.
"""

import torch
import numpy as np
from typing import List, Sequence, Union

from Base32k.encoding.codec import encode, decode


def encode_batch(
    batch: Union[torch.Tensor, np.ndarray, Sequence[Sequence[int]]],
) -> List[str]:
    """
    Encodes a batch of word sequences.

    Args:
        batch: List of word sequences, or a 2-D array/tensor with one
            message per row

    Returns:
        List of encoded strings
    """
    if isinstance(batch, torch.Tensor):
        batch = batch.detach().cpu().numpy()
    if isinstance(batch, np.ndarray) and batch.ndim != 2:
        raise ValueError(f"Expected a 2-D batch, got shape {batch.shape}")

    return [encode(words) for words in batch]

def decode_batch(
    texts: Sequence[str],
    as_tensor: bool = False,
    device: Union[torch.device, str, None] = None,
) -> Union[List[List[int]], torch.Tensor]:
    """
    Decodes a batch of encoded strings.

    Args:
        texts: Encoded strings
        as_tensor: Return an int64 tensor of shape (batch_size, word_count)
        device: Target device for the tensor (default: cpu)

    Returns:
        List of word lists, or a tensor when as_tensor is set
    """
    decoded = [decode(text) for text in texts]
    if not as_tensor:
        return decoded

    lengths = {len(words) for words in decoded}
    if len(lengths) > 1:
        raise ValueError(f"Cannot stack messages of differing word counts: {sorted(lengths)}")
    width = lengths.pop() if lengths else 0

    array = np.array(decoded, dtype=np.int64).reshape(len(decoded), width)
    return torch.tensor(array, dtype=torch.int64, device=device)
