"""
Evaluation framework for alphabetical id values.
Measures how well ids preserve alphabetical order and spread strings across
buckets, as needed for sort keys and alphabetical sharding.
"""

import string
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import Dict, List, Optional, Tuple, Union

import matplotlib.pyplot as plt
import numpy as np
from rich.console import Console
from scipy.stats import spearmanr

from .config import BASE_RANGE, EncoderConfig, ScaleRange
from .encoder import AlphabeticalIdEncoder, to_bytes
from .scaler import RangeScaler
from .utils import standard_char_value, stretch_char_value

console = Console()

DEFAULT_CHARACTER_POOL = string.ascii_letters + string.digits + " -'.&"


@dataclass
class EvaluationConfig:
    """Configuration for alphabetical id evaluation.

    Attributes:
        num_samples (int): Number of synthetic strings to generate
        seed (int): Random seed for reproducibility
        min_length (int): Shortest generated string
        max_length (int): Longest generated string
        shared_prefix_fraction (float): Fraction of strings built by
            extending a prefix of an earlier string
        num_buckets (int): Number of equal-width buckets for balance checks
        first_char_alphabetic_stretch (bool): Encoding mode under test
        scale_range (Optional[Tuple[float, float]]): Target range, if any
        character_pool (str): Characters strings are drawn from
    """
    num_samples: int = 1000
    seed: int = 42
    min_length: int = 1
    max_length: int = 16
    shared_prefix_fraction: float = 0.2
    num_buckets: int = 26
    first_char_alphabetic_stretch: bool = False
    scale_range: Optional[Tuple[float, float]] = None
    character_pool: str = DEFAULT_CHARACTER_POOL

    def __post_init__(self):
        """Validate configuration parameters."""
        if self.num_samples < 2:
            raise ValueError(f"num_samples must be at least 2, got {self.num_samples}")
        if not 0 <= self.min_length <= self.max_length:
            raise ValueError(
                f"invalid length range ({self.min_length}, {self.max_length})"
            )
        if not 0.0 <= self.shared_prefix_fraction <= 1.0:
            raise ValueError(
                f"shared_prefix_fraction must be between 0 and 1, "
                f"got {self.shared_prefix_fraction}"
            )
        if self.num_buckets < 1:
            raise ValueError(f"num_buckets must be positive, got {self.num_buckets}")
        if not self.character_pool:
            raise ValueError("character_pool cannot be empty")

    @property
    def encoder_config(self) -> EncoderConfig:
        return EncoderConfig(first_char_alphabetic_stretch=self.first_char_alphabetic_stretch)

    @property
    def target_range(self) -> Optional[ScaleRange]:
        if self.scale_range is None:
            return None
        return ScaleRange(*self.scale_range)


class SyntheticStringDataset:
    """Reproducible set of random strings for evaluation."""

    def __init__(self, config: EvaluationConfig):
        self.config = config
        self.rng = np.random.default_rng(config.seed)
        self.samples = self._generate_samples()

    def _random_string(self, length: int) -> str:
        pool = self.config.character_pool
        indices = self.rng.integers(0, len(pool), size=length)
        return ''.join(pool[i] for i in indices)

    def _generate_samples(self) -> List[str]:
        samples = []
        for _ in range(self.config.num_samples):
            length = int(self.rng.integers(
                self.config.min_length, self.config.max_length + 1
            ))
            if samples and self.rng.random() < self.config.shared_prefix_fraction:
                # Extend a prefix of an earlier sample to get near neighbours
                base = samples[int(self.rng.integers(0, len(samples)))]
                prefix = base[:int(self.rng.integers(0, len(base) + 1))]
                text = prefix + self._random_string(max(length - len(prefix), 0))
            else:
                text = self._random_string(length)
            samples.append(text)
        return samples

    def __len__(self) -> int:
        return len(self.samples)

    def __getitem__(self, idx: int) -> str:
        return self.samples[idx]


def collation_key(text: Union[str, bytes], stretch: bool = False) -> Tuple[int, ...]:
    """Case-folded ordering key matching the encoder's alphabet.

    Trailing non-letters are dropped, since the encoder treats them like the
    end of the string.
    """
    data = to_bytes(text)
    values = [standard_char_value(byte) for byte in data]
    if stretch and data:
        values[0] = stretch_char_value(data[0])
    while values and values[-1] == 0:
        values.pop()
    return tuple(values)


class AlphabeticalIdEvaluator:
    """Evaluator for alphabetical ids focusing on:
    1. Order preservation
    2. Resolution (collisions and precision)
    3. Distribution over the output range
    """

    def __init__(self, config: EvaluationConfig = None):
        self.config = config or EvaluationConfig()
        self.encoder = AlphabeticalIdEncoder(self.config.encoder_config)
        self.scaler = RangeScaler(self.config.target_range)
        self.metrics: Dict[str, float] = {}
        self.ids: Optional[np.ndarray] = None

    @property
    def output_bounds(self) -> Tuple[float, float]:
        target = self.config.target_range
        if target is None:
            return BASE_RANGE.lower, BASE_RANGE.upper
        return min(target.lower, target.upper), max(target.lower, target.upper)

    def encode(self, texts: List[str]) -> np.ndarray:
        return self.scaler.scale_array(self.encoder.batch_encode(texts))

    def evaluate(self, dataset: Optional[SyntheticStringDataset] = None) -> Dict[str, float]:
        """Run complete evaluation suite."""
        console.print("\n[bold]Starting Alphabetical Id Evaluation...[/bold]")
        if dataset is None:
            dataset = SyntheticStringDataset(self.config)

        texts = list(dataset.samples)
        ids = self.encode(texts)
        stretch = self.config.first_char_alphabetic_stretch
        keys = [collation_key(text, stretch) for text in texts]

        metrics = {
            "rank_correlation": self._evaluate_rank_correlation(keys, ids),
            "order_violations": self._evaluate_order_violations(keys, ids),
            "collision_rate": self._evaluate_collision_rate(keys, ids),
            "range_coverage": self._evaluate_range_coverage(ids),
            "bucket_balance": self._evaluate_bucket_balance(ids),
            "precision_saturation": float(self.precision_saturation()),
        }

        console.print("\n[cyan]Metrics:[/cyan]")
        for metric, value in metrics.items():
            console.print(f"  {metric}: {value:.3f}")
        console.print("\n[bold green]Evaluation Complete![/bold green]")

        self.ids = ids
        self.metrics = metrics
        return metrics

    def _key_ranks(self, keys: List[Tuple[int, ...]]) -> np.ndarray:
        ordered = sorted(set(keys))
        rank = {key: i for i, key in enumerate(ordered)}
        return np.array([rank[key] for key in keys], dtype=np.float64)

    def _evaluate_rank_correlation(
        self,
        keys: List[Tuple[int, ...]],
        ids: np.ndarray
    ) -> float:
        """Spearman correlation between collation order and id order.

        Reversed scale ranges are expected to yield a negative correlation.
        """
        ranks = self._key_ranks(keys)
        if np.all(ranks == ranks[0]) or np.all(ids == ids[0]):
            return float('nan')
        correlation, _ = spearmanr(ranks, ids)
        return float(correlation)

    def _evaluate_order_violations(
        self,
        keys: List[Tuple[int, ...]],
        ids: np.ndarray
    ) -> float:
        """Fraction of neighbouring strings (in collation order) whose ids
        run against the configured numbering direction."""
        order = sorted(range(len(keys)), key=lambda i: keys[i])
        sorted_ids = ids[order]
        steps = np.diff(sorted_ids)
        if not len(steps):
            return 0.0
        target = self.config.target_range
        if target is not None and target.reversed:
            steps = -steps
        return float(np.mean(steps < 0))

    def _evaluate_collision_rate(
        self,
        keys: List[Tuple[int, ...]],
        ids: np.ndarray
    ) -> float:
        """Fraction of distinct collation keys that share an id with another key."""
        ids_by_key = {}
        for key, value in zip(keys, ids):
            ids_by_key[key] = value
        if not ids_by_key:
            return 0.0
        distinct_ids = len(set(ids_by_key.values()))
        return 1.0 - distinct_ids / len(ids_by_key)

    def _evaluate_range_coverage(self, ids: np.ndarray) -> float:
        """Span of produced ids relative to the output range."""
        low, high = self.output_bounds
        if high == low:
            return 1.0
        return float((ids.max() - ids.min()) / (high - low))

    def _evaluate_bucket_balance(self, ids: np.ndarray) -> float:
        """1 minus the coefficient of variation of bucket counts, clipped to [0, 1]."""
        counts = self.bucket_counts(ids)
        mean = counts.mean()
        if mean == 0:
            return 0.0
        return float(np.clip(1.0 - counts.std() / mean, 0.0, 1.0))

    def bucket_counts(self, ids: np.ndarray) -> np.ndarray:
        """Histogram of ids over equal-width buckets of the output range."""
        low, high = self.output_bounds
        if high == low:
            high = low + 1.0
        counts, _ = np.histogram(ids, bins=self.config.num_buckets, range=(low, high))
        return counts

    def precision_saturation(self, max_length: int = 64) -> int:
        """Return the 1-based position of the first character that no longer
        changes the id, or 0 if every position up to max_length matters."""
        prefix = ''
        for position in range(1, max_length + 1):
            if self.encoder.encode(prefix + 'z') == self.encoder.encode(prefix):
                return position
            prefix += 'm'
        return 0

    def save_results(self, save_dir: Union[str, Path]) -> Path:
        """Save evaluation results and a bucket histogram.

        Args:
            save_dir: Directory to save results

        Returns:
            Path: Path of the written text report
        """
        if self.ids is None:
            raise RuntimeError("evaluate() must be run before save_results()")

        save_dir = Path(save_dir)
        save_dir.mkdir(parents=True, exist_ok=True)
        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")

        results_path = save_dir / f"evaluation_results_{timestamp}.txt"
        with open(results_path, "w") as f:
            f.write("Alphabetical Id Evaluation Results\n")
            f.write("==================================\n\n")
            f.write(f"Samples: {self.config.num_samples}\n")
            f.write(f"Stretch mode: {self.config.first_char_alphabetic_stretch}\n")
            f.write(f"Scale range: {self.config.scale_range}\n\n")
            for name, value in sorted(self.metrics.items()):
                f.write(f"{name}: {value:.3f}\n")

        console.print(f"Results saved to {results_path}")
        self._create_visualizations(save_dir, timestamp)
        return results_path

    def _create_visualizations(self, save_dir: Path, timestamp: str) -> None:
        """Plot bucket occupancy of the evaluated ids."""
        counts = self.bucket_counts(self.ids)
        low, high = self.output_bounds

        fig, ax = plt.subplots(figsize=(12, 6))
        ax.bar(np.arange(len(counts)), counts)
        ax.axhline(counts.mean(), color='red', linestyle='--', label='mean')
        ax.set_title(f'Bucket occupancy over [{low:g}, {high:g}]')
        ax.set_xlabel('Bucket')
        ax.set_ylabel('Strings')
        ax.legend()

        plt.tight_layout()
        viz_path = save_dir / f"evaluation_results_{timestamp}.png"
        plt.savefig(viz_path)
        plt.close(fig)
