"""Result pages as served by the tracking CGI, trimmed down to what is parsed."""

SINGLE_PAGE = """<html><body>
<table class="saisin">
  <tr><td class="bold">伝票番号 1234-5678-9013</td></tr>
  <tr><td class="font14">配達完了</td><td>このお荷物は配達が完了しました。</td></tr>
</table>
<table class="meisai">
  <tr><td>No</td><td>荷物状況</td><td>日付</td><td>時刻</td><td>担当店名</td><td>担当店コード</td></tr>
  <tr><td>1</td><td>荷物受付</td><td>10/18</td><td>09:15</td><td>新宿センター</td><td>032990</td></tr>
  <tr><td>2</td><td>配達完了</td><td></td><td></td><td>東京支店</td><td>001</td></tr>
</table>
</body></html>
"""

BATCH_PAGE = """<html><body>
<center>
<table class="saisin">
  <tr><td class="number">1件目</td></tr>
  <tr><td class="bold">伝票番号 1234-5678-9013</td></tr>
  <tr><td class="font14">配達完了</td></tr>
</table>
<table class="meisai">
  <tr><td>No</td><td>荷物状況</td><td>日付</td><td>時刻</td><td>担当店名</td><td>担当店コード</td></tr>
  <tr><td>1</td><td>配達完了</td><td>10/19</td><td>12:34</td><td>東京支店</td><td>001</td></tr>
</table>
</center>
<center>
<table class="saisin">
  <tr><td class="bold">伝票番号 1234-5678-9024</td></tr>
  <tr><td class="font14">伝票番号未登録</td></tr>
</table>
</center>
</body></html>
"""

